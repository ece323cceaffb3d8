"""Link API domain."""

from .extract_links import extract_absolute_links, extract_links, extract_relative_links
from .is_valid_url import is_valid_url
from .Link import Link
from .LinkCheckResult import LinkCheckResult
from .LinkKind import LinkKind
from .LinkShape import LinkShape
from .looks_like_file_path import looks_like_file_path
from .repair_unbalanced_parens import register_repair_rule, repair_unbalanced_parens

__all__ = [
    "Link",
    "LinkCheckResult",
    "LinkKind",
    "LinkShape",
    "extract_absolute_links",
    "extract_links",
    "extract_relative_links",
    "is_valid_url",
    "looks_like_file_path",
    "register_repair_rule",
    "repair_unbalanced_parens",
]
