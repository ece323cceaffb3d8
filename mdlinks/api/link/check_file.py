"""Check every link in one markdown file."""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from urllib.parse import unquote

from ..config.CheckConfig import CheckConfig
from ._reachability.UrlCheck import UrlCheck
from .extract_links import extract_links
from .Link import Link
from .LinkCheckResult import LinkCheckResult
from .LinkKind import LinkKind

logger = logging.getLogger(__name__)

UrlCheckFn = Callable[[str], UrlCheck]


def check_file(
    path: Path,
    root: Path,
    config: CheckConfig,
    url_checker: UrlCheckFn | None,
) -> list[LinkCheckResult]:
    """Extract and check the links of one markdown file.

    Absolute URLs are probed once per file through ``url_checker``, at most
    ``config.link_batch_size`` at a time. Relative targets are resolved
    against the file's directory. Results follow source order.

    Args:
        path: Markdown file to read
        root: Scan root, used to report the file relative to it
        config: Batch size for URL probes
        url_checker: Probe for absolute URLs; None skips them (offline mode)

    Returns:
        One result per relative link occurrence and per distinct URL. An
        unreadable file yields a single broken result.
    """
    display_path = _display_path(path, root)
    logger.info("Processing: %s", display_path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return [
            LinkCheckResult(
                file=display_path,
                link=display_path,
                kind=None,
                status="broken",
                error=f"Cannot read file: {exc}",
            )
        ]

    links = extract_links(text)

    first_by_url: dict[str, Link] = {}
    for link in links:
        if link.kind is LinkKind.ABSOLUTE:
            first_by_url.setdefault(link.target_text, link)

    outcomes = _probe_urls(list(first_by_url), config.link_batch_size, url_checker)

    results: list[LinkCheckResult] = []
    for link in links:
        if link.kind is LinkKind.RELATIVE:
            results.append(_check_relative(display_path, path.parent, link))
        elif first_by_url[link.target_text] is link:
            results.append(_absolute_result(display_path, link, outcomes.get(link.target_text)))
    return results


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _probe_urls(urls: list[str], batch_size: int, url_checker: UrlCheckFn | None) -> dict[str, UrlCheck]:
    outcomes: dict[str, UrlCheck] = {}
    if url_checker is None or not urls:
        return outcomes

    def probe(url: str) -> UrlCheck:
        try:
            return url_checker(url)
        except Exception as exc:  # a failing probe never aborts its batch
            logger.exception("Probe raised for %s", url)
            return UrlCheck(ok=False, error=str(exc))

    with ThreadPoolExecutor(max_workers=batch_size) as pool:
        for start in range(0, len(urls), batch_size):
            batch = urls[start : start + batch_size]
            outcomes.update(zip(batch, pool.map(probe, batch)))
    return outcomes


def _absolute_result(display_path: str, link: Link, outcome: UrlCheck | None) -> LinkCheckResult:
    if outcome is None:
        return LinkCheckResult(
            file=display_path,
            link=link.target_text,
            kind=LinkKind.ABSOLUTE,
            status="skipped",
            line_number=link.line_number,
            error="Offline: not probed",
        )
    if outcome.skipped:
        status = "skipped"
    else:
        status = "ok" if outcome.ok else "broken"
    return LinkCheckResult(
        file=display_path,
        link=link.target_text,
        kind=LinkKind.ABSOLUTE,
        status=status,
        line_number=link.line_number,
        status_code=outcome.status_code,
        error=outcome.error,
    )


def _check_relative(display_path: str, base_dir: Path, link: Link) -> LinkCheckResult:
    error = None
    try:
        # Targets are often percent-encoded ("my%20notes.md")
        exists = (base_dir / link.target_text).exists() or (base_dir / unquote(link.target_text)).exists()
        if not exists:
            error = "Not found"
    except OSError as exc:
        exists = False
        error = str(exc)
    return LinkCheckResult(
        file=display_path,
        link=link.target_text,
        kind=LinkKind.RELATIVE,
        status="ok" if exists else "broken",
        line_number=link.line_number,
        error=error,
    )
