"""Check links across many markdown files."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config.CheckConfig import CheckConfig
from .check_file import UrlCheckFn, check_file
from .LinkCheckResult import LinkCheckResult


def check_files(
    files: list[Path],
    root: Path,
    config: CheckConfig,
    url_checker: UrlCheckFn | None,
) -> list[LinkCheckResult]:
    """Check files with at most ``config.concurrency_limit`` in flight.

    Results keep the order of ``files``, then source order within a file.
    """
    if not files:
        return []

    with ThreadPoolExecutor(max_workers=config.concurrency_limit) as pool:
        per_file = pool.map(lambda path: check_file(path, root, config, url_checker), files)
        return [result for results in per_file for result in results]
