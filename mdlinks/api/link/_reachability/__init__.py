"""URL reachability probing."""

from .check_url import check_url
from .is_localhost_url import is_localhost_url
from .UrlCheck import UrlCheck
from .UrlChecker import UrlChecker

__all__ = ["UrlCheck", "UrlChecker", "check_url", "is_localhost_url"]
