"""URL shape check."""

import re

# Scheme followed by one or more dotted labels and an alphabetic TLD.
# Only the prefix is checked: path, query and fragment are not validated.
URL_SHAPE_PATTERN = re.compile(r"^https?://([a-zA-Z0-9]([a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]{2,}")


def is_valid_url(url: str) -> bool:
    """Return True if url has an http(s) scheme and a dotted domain (``https://`` alone is rejected)."""
    return URL_SHAPE_PATTERN.match(url) is not None
