"""Blank out fenced code blocks."""

import re

CODE_FENCE_PATTERN = re.compile(r"```.*?```", re.DOTALL)
NON_NEWLINE_PATTERN = re.compile(r"[^\n]")


def _blank_code_fences(text: str) -> str:
    """Replace fenced code with spaces, keeping newlines so offsets and line numbers stay valid."""
    return CODE_FENCE_PATTERN.sub(lambda match: NON_NEWLINE_PATTERN.sub(" ", match.group(0)), text)
