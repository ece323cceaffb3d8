"""Outcome of checking one link occurrence."""

from dataclasses import dataclass
from typing import Any, Literal

from .LinkKind import LinkKind

LinkStatus = Literal["ok", "broken", "skipped"]


@dataclass(frozen=True)
class LinkCheckResult:
    """A checked link, attached to the file it was found in.

    ``kind`` is None for the single result recorded when a file cannot be read.
    """

    file: str
    link: str
    kind: LinkKind | None
    status: LinkStatus
    line_number: int = 0
    status_code: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for command output (file is the grouping key, so it is omitted)."""
        return {
            "link": self.link,
            "kind": self.kind.value if self.kind else None,
            "status_code": self.status_code,
            "error": self.error,
            "line_number": self.line_number,
        }
