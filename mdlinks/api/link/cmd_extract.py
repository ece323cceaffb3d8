"""Link extract API command.

CLI: mdlinks link extract <path>
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkExtractOutput
from ..StageResult import StageResult
from .extract_links import extract_links
from .LinkKind import LinkKind


def cmd_extract(path: str) -> StageResult:
    """Extract the links of one markdown file without checking them."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Resolving path...")
        file_path = Path(path).expanduser().resolve()

        if not file_path.is_file():
            result_obj.output = LinkExtractOutput(
                errors=["File does not exist"],
                warnings=[],
                path=str(file_path),
                links=[],
                absolute=[],
                relative=[],
            ).model_dump(mode="python")
            result_obj.result = f"File not found: {path}"
            result_obj.success = False
            return

        yield (0.4, "Reading file...")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            result_obj.output = LinkExtractOutput(
                errors=[f"Cannot read file: {exc}"],
                warnings=[],
                path=str(file_path),
                links=[],
                absolute=[],
                relative=[],
            ).model_dump(mode="python")
            result_obj.result = f"Error reading {file_path.name}: {exc}"
            result_obj.success = False
            return

        yield (0.7, "Extracting links...")
        links = extract_links(text)

        yield (1.0, "Complete")
        result_obj.output = LinkExtractOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            links=[
                {
                    "target": link.target_text,
                    "kind": link.kind.value,
                    "shape": link.shape.value,
                    "raw_target": link.raw_target,
                    "label": link.label,
                    "line_number": link.line_number,
                    "column_number": link.column_number,
                }
                for link in links
            ],
            absolute=list(dict.fromkeys(link.target_text for link in links if link.kind is LinkKind.ABSOLUTE)),
            relative=[link.target_text for link in links if link.kind is LinkKind.RELATIVE],
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} links in {file_path.name}"
        result_obj.success = True

    return StageResult(announce=f"Extracting links from {path}...", progress_callback=do_work)
