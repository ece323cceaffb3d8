"""Recursive markdown file discovery."""

import os
from pathlib import Path

from ..config.ScanConfig import ScanConfig


def find_markdown_files(root: Path, config: ScanConfig) -> list[Path]:
    """Find markdown files under root in a stable order.

    Directories named in ``config.exclude_dirnames`` are pruned, not just
    filtered, so large trees such as node_modules are never walked.
    """
    suffixes = tuple(config.extensions)
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in config.exclude_dirnames)
        for filename in sorted(filenames):
            if filename.endswith(suffixes):
                files.append(Path(dirpath) / filename)
    return files
