"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkExtractOutput(BaseOutputSchema):
    """Output schema for link extract command.

    Each entry of ``links`` has: target, kind, shape, raw_target, label,
    line_number, column_number.
    """

    path: str = Field(..., description="Resolved path of the scanned file")
    links: list[dict[str, Any]] = Field(..., description="Every link in source order")
    absolute: list[str] = Field(..., description="Deduplicated absolute URLs")
    relative: list[str] = Field(..., description="Relative file targets in source order")


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    ``broken`` maps a file (relative to the scanned root) to its broken
    links; each entry has: link, kind, status_code, error, line_number.
    """

    path: str = Field(..., description="Resolved path that was scanned")
    files_scanned: int = Field(..., description="Number of markdown files read")
    total_links: int = Field(..., description="Number of links checked")
    broken_count: int = Field(..., description="Number of broken links")
    skipped_count: int = Field(..., description="Number of links not probed (localhost, offline)")
    broken: dict[str, list[dict[str, Any]]] = Field(..., description="Broken links grouped by file")


register_output_schema("link", "extract", LinkExtractOutput)
register_output_schema("link", "check", LinkCheckOutput)
