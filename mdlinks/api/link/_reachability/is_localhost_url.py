"""Detect URLs pointing at a local development server."""

import re

EXPLICIT_PORT_PATTERN = re.compile(r"https?://[^/]+:\d+")


def is_localhost_url(url: str) -> bool:
    """Return True for localhost, 127.0.0.1, or any URL with an explicit port."""
    return "localhost" in url or "127.0.0.1" in url or EXPLICIT_PORT_PATTERN.match(url) is not None
