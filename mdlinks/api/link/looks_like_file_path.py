"""Heuristic filter for relative link targets."""

import re

FILE_EXTENSIONS = (
    # documents
    ".md",
    ".markdown",
    ".txt",
    ".rst",
    ".pdf",
    ".doc",
    ".docx",
    # code
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".py",
    ".sh",
    # markup and styles
    ".html",
    ".htm",
    ".css",
    ".xml",
    # data
    ".json",
    ".yml",
    ".yaml",
    ".toml",
    ".csv",
    # images
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".webp",
)

CODE_SYMBOLS = frozenset({"=", "->", "=>", "{", "}", "()", "[]"})
CODE_CHARACTERS = (",", ":", "{", "}", "`")
DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def looks_like_file_path(candidate: str) -> bool:
    """Decide whether a relative link target refers to a file.

    Markdown links are routinely abused for code (``[x](a, b)``) and prose,
    so the target is only reported when it plausibly names a path. Rules
    are applied in order and the first one that matches decides.

    Args:
        candidate: Link target with any fragment and query already removed.

    Returns:
        True if the candidate should be checked on the filesystem.
    """
    # "./uint8array" reads like a module specifier, not a file
    if candidate.startswith("./") and "/" not in candidate[2:] and "." not in candidate[2:]:
        return False

    if candidate.lower().endswith(FILE_EXTENSIONS):
        return True

    words = candidate.split(" ")
    is_number = DIGITS_PATTERN.match(candidate) is not None

    if ("/" in candidate or "\\" in candidate) and len(words) <= 2:
        return True

    if " " in candidate and (any(char in candidate for char in CODE_CHARACTERS) or is_number):
        return False

    if candidate in CODE_SYMBOLS or is_number:
        return False

    # Sentences, not paths
    if len(words) > 3:
        return False

    return True
