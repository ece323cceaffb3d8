"""Outcome of a single URL probe."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UrlCheck:
    """Result of probing one URL."""

    ok: bool
    status_code: int | None = None
    error: str | None = None
    skipped: bool = False
