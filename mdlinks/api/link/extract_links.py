"""Markdown link extraction."""

import re
from bisect import bisect_right

from ._blank_code_fences import _blank_code_fences
from .is_valid_url import is_valid_url
from .Link import Link
from .LinkKind import LinkKind
from .LinkShape import LinkShape
from .looks_like_file_path import looks_like_file_path
from .repair_unbalanced_parens import repair_unbalanced_parens

# Alternatives are listed in precedence order. finditer tries them in order at
# each position and never rescans consumed text, so a URL inside [..](..) or
# <..> is not picked up again as a bare URL.
#
# A markdown target is a run of "(...)" groups and non-parenthesis characters
# ended by the first unmatched ")". Group bodies may not contain ")", so only
# one nesting level closes: "F_(a_(b)))" captures "F_(a_(b)".
#
# Labels exclude "[" so an unclosed "[" fails at once instead of scanning to
# the end of the text. A bare URL keeps an unmatched "(" but stops at ")".
LINK_PATTERN = re.compile(
    r"\[(?P<label>[^\[\]]*)\]\((?P<target>(?:\([^)\n]*\)|[^()\n])+)\)"
    r"|<(?P<autolink>https?://[^>\s]+)>"
    r"|(?P<bare>https?://(?:\([^\s)\"'<>]*\)|[^\s)\"'<>])+)"
)

LINK_TITLE_PATTERN = re.compile(r"^(?P<destination>.+?)\s+(?:\"[^\"]*\"|'[^']*')$")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+:")
NEWLINE_PATTERN = re.compile(r"\n")

ABSOLUTE_PREFIXES = ("http://", "https://")
TRAILING_PUNCTUATION = ".,;:!?)"


def extract_links(text: str) -> list[Link]:
    """Extract every link from markdown text.

    Fenced code blocks are ignored. Absolute and relative links are returned
    together, ordered by where they start in the text. Malformed markdown is
    skipped silently; any string input is accepted.

    Args:
        text: Markdown document content.

    Returns:
        Links in source order. An absolute URL appearing several times is
        returned once per occurrence.
    """
    scanned = _blank_code_fences(text)
    line_starts = [0] + [match.end() for match in NEWLINE_PATTERN.finditer(scanned)]

    links: list[Link] = []
    for match in LINK_PATTERN.finditer(scanned):
        if match.group("target") is not None:
            shape, raw_target, label = LinkShape.MARKDOWN, match.group("target"), match.group("label")
            target = _strip_destination(raw_target)
        elif match.group("autolink") is not None:
            shape, raw_target, label = LinkShape.AUTOLINK, match.group("autolink"), ""
            target = raw_target.strip()
        else:
            shape, raw_target, label = LinkShape.BARE, match.group("bare"), ""
            target = _strip_trailing_punctuation(raw_target)

        resolved = _resolve_target(target)
        if resolved is None:
            continue

        kind, target_text = resolved
        line_index = bisect_right(line_starts, match.start()) - 1
        links.append(
            Link(
                target_text=target_text,
                kind=kind,
                raw_target=raw_target,
                shape=shape,
                start=match.start(),
                line_number=line_index + 1,
                column_number=match.start() - line_starts[line_index] + 1,
                label=label.strip(),
            )
        )
    return links


def extract_absolute_links(text: str) -> list[str]:
    """Extract http(s) URLs from markdown text, deduplicated in order of first occurrence."""
    urls = (link.target_text for link in extract_links(text) if link.kind is LinkKind.ABSOLUTE)
    return list(dict.fromkeys(urls))


def extract_relative_links(text: str) -> list[str]:
    """Extract relative file references from markdown links, in source order."""
    return [link.target_text for link in extract_links(text) if link.kind is LinkKind.RELATIVE]


def _strip_destination(raw_target: str) -> str:
    """Trim a markdown link destination and drop an optional title."""
    target = raw_target.strip()
    title_match = LINK_TITLE_PATTERN.match(target)
    if title_match:
        target = title_match.group("destination")
    if target.startswith("<") and target.endswith(">"):
        target = target[1:-1].strip()
    return target


def _strip_trailing_punctuation(url: str) -> str:
    """Drop sentence punctuation glued to the end of a bare URL.

    A ``)`` is kept when it closes a parenthesis opened inside the URL.
    """
    while url and url[-1] in TRAILING_PUNCTUATION:
        if url[-1] == ")" and url.count("(") >= url.count(")"):
            break
        url = url[:-1]
    return url


def _resolve_target(target: str) -> tuple[LinkKind, str] | None:
    """Classify a captured target, returning None when it is not reportable."""
    if target.startswith(ABSOLUTE_PREFIXES):
        url = repair_unbalanced_parens(target)
        if not is_valid_url(url):
            return None
        return LinkKind.ABSOLUTE, url

    # mailto:, ftp:, tel: ... and root-anchored paths are neither kind
    if SCHEME_PATTERN.match(target) or target.startswith("/"):
        return None

    path = target.split("#", 1)[0].split("?", 1)[0].strip()
    if not path or not looks_like_file_path(path):
        return None
    return LinkKind.RELATIVE, path
