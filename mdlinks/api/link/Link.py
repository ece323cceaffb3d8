"""Link dataclass (UNO: single model)."""

from dataclasses import dataclass

from .LinkKind import LinkKind
from .LinkShape import LinkShape


@dataclass(frozen=True)
class Link:
    """A link found in a markdown document.

    ``raw_target`` is the untrimmed text captured between the delimiters.
    ``target_text`` is the normalized form: trimmed, parenthesis-repaired for
    absolute URLs, fragment- and query-stripped for relative paths.
    """

    target_text: str
    kind: LinkKind
    raw_target: str
    shape: LinkShape
    start: int  # offset of the match in the source text
    line_number: int
    column_number: int
    label: str = ""
