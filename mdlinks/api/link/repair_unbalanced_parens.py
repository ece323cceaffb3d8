"""Repair URLs whose trailing parenthesis was mis-captured."""

import re
from collections.abc import Callable
from urllib.parse import urlsplit

RepairStrategy = Callable[[str], str]

# Path ends at the first "#" or ")"; an optional line range may follow
GITHUB_BLOB_PATTERN = re.compile(
    r"^(?P<path>https?://(?:www\.)?github\.com/[^/]+/[^/]+/blob/[^/]+/[^#)]+)(?P<lines>#L\d+(?:-L\d+)?)?"
)


def _repair_github_blob(url: str) -> str:
    """Keep a blob URL up through its file path and line-range fragment."""
    match = GITHUB_BLOB_PATTERN.match(url)
    if match is None:
        return url
    return match.group("path") + (match.group("lines") or "")


def _repair_wikipedia(url: str) -> str:
    """Cut an article URL at the first ``)`` that closes nothing."""
    if not urlsplit(url).path.startswith("/wiki/"):
        return url

    depth = 0
    for index, char in enumerate(url):
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return url[:index]
            depth -= 1
    return url


# Host pattern (searched in the lower-cased host) -> strategy.
# First matching pattern decides.
_REPAIR_RULES: dict[str, RepairStrategy] = {
    r"^(?:www\.)?github\.com$": _repair_github_blob,
    r"wikipedia\.org$": _repair_wikipedia,
}


def register_repair_rule(host_pattern: str, strategy: RepairStrategy) -> None:
    """Register a repair strategy for hosts matching host_pattern.

    Args:
        host_pattern: Regular expression searched in the lower-cased host
        strategy: Callable taking the unbalanced URL and returning the repaired one
    """
    if host_pattern in _REPAIR_RULES:
        raise ValueError(f"Repair rule already registered for {host_pattern}")
    _REPAIR_RULES[host_pattern] = strategy


def repair_unbalanced_parens(url: str) -> str:
    """Correct a URL whose parentheses do not balance.

    Balanced URLs are returned as-is. Otherwise the first registered rule
    whose host pattern matches decides; with no matching rule the URL is
    returned unchanged. Never raises.
    """
    if url.count("(") == url.count(")"):
        return url

    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        return url

    for host_pattern, strategy in _REPAIR_RULES.items():
        if re.search(host_pattern, host):
            return strategy(url)
    return url
