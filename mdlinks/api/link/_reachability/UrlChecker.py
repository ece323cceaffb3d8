"""Thread-safe callable wrapping check_url."""

import threading

import requests

from ...config.CheckConfig import CheckConfig
from .check_url import check_url
from .UrlCheck import UrlCheck


class UrlChecker:
    """Callable URL probe holding one requests session per thread.

    Use as a context manager so sessions are closed when checking is done.
    """

    def __init__(self, config: CheckConfig):
        self.config = config
        self._local = threading.local()
        self._sessions: list[requests.Session] = []
        self._lock = threading.Lock()

    def __call__(self, url: str) -> UrlCheck:
        return check_url(url, self.config, self._session())

    def __enter__(self) -> "UrlChecker":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    def close(self) -> None:
        """Close every session opened by this checker."""
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()
