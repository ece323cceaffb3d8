"""Unit tests for mdlinks.api.link.is_valid_url."""

import pytest

from mdlinks.api.link.is_valid_url import is_valid_url

pytestmark = pytest.mark.link


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com",
        "http://example.com/path?q=1#frag",
        "https://sub.domain.example.org/a/b",
        "https://en.wikipedia.org/wiki/C_(programming_language)",
        "https://my-site.co.uk",
        # Only the scheme and host prefix are validated
        "https://example.com/special_chars+&$%.md",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "",
        "https://",
        "http://",
        "https://localhost",
        "https://-bad.example.com",
        "https://example.c",
        "ftp://example.com",
        "example.com",
        "mailto:user@example.com",
    ],
)
def test_invalid_urls(url):
    assert is_valid_url(url) is False
