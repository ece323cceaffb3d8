"""Probe a URL over HTTP."""

import logging
import re

import requests

from ...config.CheckConfig import CheckConfig
from .is_localhost_url import is_localhost_url
from .UrlCheck import UrlCheck

logger = logging.getLogger(__name__)

# Text GitHub renders with a 200 status for missing files
GITHUB_NOT_FOUND_MARKERS = (
    "404: Not Found",
    "This file does not appear to exist",
    "Page not found",
)
GITHUB_PAGE_PATTERN = re.compile(r"github\.com/.*/(?:blob|tree)/")


def check_url(url: str, config: CheckConfig, session: requests.Session | None = None) -> UrlCheck:
    """Check whether url resolves.

    GitHub blob/tree pages are fetched with GET so the body can be inspected.
    Everything else is probed with HEAD, falling back to GET when the server
    answers 403 or the HEAD request fails. Request errors are returned as a
    broken result, never raised.

    Args:
        url: Absolute http(s) URL
        config: Probe settings (timeout, user agent, skip rules)
        session: Session to reuse; a temporary one is created if None

    Returns:
        UrlCheck describing the outcome
    """
    if config.skip_localhost and is_localhost_url(url):
        return UrlCheck(ok=True, error="Skipped localhost URL", skipped=True)

    for pattern in config.force_valid_patterns:
        if re.search(pattern, url):
            return UrlCheck(ok=True, status_code=200)

    if session is None:
        with requests.Session() as owned:
            return check_url(url, config, owned)

    options = {
        "allow_redirects": True,
        "timeout": config.timeout,
        "headers": {"User-Agent": config.user_agent},
    }
    try:
        if GITHUB_PAGE_PATTERN.search(url):
            return _check_github_page(session, url, options)
        return _check_with_fallback(session, url, options)
    except requests.RequestException as exc:
        logger.info("Request failed for %s: %s", url, exc)
        return UrlCheck(ok=False, error=f"{exc.__class__.__name__}: {exc}")


def _check_github_page(session: requests.Session, url: str, options: dict) -> UrlCheck:
    response = session.get(url, **options)
    if response.ok and any(marker in response.text for marker in GITHUB_NOT_FOUND_MARKERS):
        return UrlCheck(ok=False, status_code=response.status_code, error="GitHub 404 (page shows not found)")
    return _from_response(response)


def _check_with_fallback(session: requests.Session, url: str, options: dict) -> UrlCheck:
    try:
        response = session.head(url, **options)
    except requests.RequestException as exc:
        # Some servers reject HEAD outright
        logger.debug("HEAD failed for %s (%s), retrying with GET", url, exc)
        return _from_response(session.get(url, **options))

    if response.status_code == 403:
        # Some servers block HEAD but serve GET
        try:
            return _from_response(session.get(url, **options))
        except requests.RequestException:
            return _from_response(response)

    return _from_response(response)


def _from_response(response: requests.Response) -> UrlCheck:
    return UrlCheck(ok=response.ok, status_code=response.status_code)
