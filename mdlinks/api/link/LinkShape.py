"""Syntactic shape a link was found in."""

from enum import Enum


class LinkShape(str, Enum):
    MARKDOWN = "markdown"  # [label](target)
    AUTOLINK = "autolink"  # <https://...>
    BARE = "bare"  # https://... in prose
