"""mdlinks - find broken links in markdown documents."""

from .api.link.extract_links import extract_absolute_links, extract_links, extract_relative_links
from .api.link.looks_like_file_path import looks_like_file_path
from .api.link.repair_unbalanced_parens import repair_unbalanced_parens

__all__ = [
    "extract_absolute_links",
    "extract_links",
    "extract_relative_links",
    "looks_like_file_path",
    "repair_unbalanced_parens",
]
