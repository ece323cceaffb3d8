"""Unit test fixtures: fakes standing in for requests sessions."""

import pytest
import requests


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, text: str = ""):
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class FakeSession:
    """Records requests and replays canned responses.

    ``responses`` maps (method, url) to a FakeResponse or an exception
    instance to raise. Unknown requests raise ConnectionError.
    """

    def __init__(self, responses: dict | None = None):
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def _respond(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))
        outcome = self.responses.get((method, url))
        if outcome is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def head(self, url: str, **kwargs):
        return self._respond("HEAD", url, **kwargs)

    def get(self, url: str, **kwargs):
        return self._respond("GET", url, **kwargs)

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def fake_session_factory():
    """Build FakeSession instances from a responses mapping."""
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
