"""Link check API command.

CLI: mdlinks link check <path> [--offline]
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import set_log_level
from .._output_schemas.link import LinkCheckOutput
from ..config.LinksConfig import LinksConfig
from ..StageResult import StageResult
from ._reachability.UrlChecker import UrlChecker
from .check_files import check_files
from .find_markdown_files import find_markdown_files


def cmd_check(path: str, offline: bool = False) -> StageResult:
    """Check every link in the markdown files under path.

    Args:
        path: Directory to scan recursively, or a single markdown file
        offline: Skip probing absolute URLs; only relative links are checked
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        root = Path(path).expanduser().resolve()
        try:
            config = LinksConfig.load()
        except ValueError as e:
            result_obj.output = _empty_output(root, [str(e)])
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return
        set_log_level(config.log.level)

        yield (0.2, "Finding markdown files...")
        if not root.exists():
            result_obj.output = _empty_output(root, ["Path does not exist"])
            result_obj.result = f"Path not found: {path}"
            result_obj.success = False
            return

        if root.is_file():
            files = [root]
            base = root.parent
        else:
            files = find_markdown_files(root, config.scan)
            base = root

        yield (0.3, f"Checking links in {len(files)} markdown file(s)...")
        if offline:
            results = check_files(files, base, config.check, None)
        else:
            with UrlChecker(config.check) as checker:
                results = check_files(files, base, config.check, checker)

        yield (0.9, "Summarizing results...")
        broken: dict[str, list[dict]] = {}
        for link_result in results:
            if link_result.status == "broken":
                broken.setdefault(link_result.file, []).append(link_result.to_dict())
        broken_count = sum(len(entries) for entries in broken.values())
        skipped_count = sum(1 for link_result in results if link_result.status == "skipped")

        yield (1.0, "Complete")
        result_obj.output = LinkCheckOutput(
            errors=[],
            warnings=[] if files else ["No markdown files found"],
            path=str(root),
            files_scanned=len(files),
            total_links=len(results),
            broken_count=broken_count,
            skipped_count=skipped_count,
            broken=broken,
        ).model_dump(mode="python")
        result_obj.result = f"Checked {len(results)} links in {len(files)} file(s): {broken_count} broken"
        result_obj.success = broken_count == 0

    return StageResult(announce=f"Checking links in {path}...", progress_callback=do_work)


def _empty_output(root: Path, errors: list[str]) -> dict:
    return LinkCheckOutput(
        errors=errors,
        warnings=[],
        path=str(root),
        files_scanned=0,
        total_links=0,
        broken_count=0,
        skipped_count=0,
        broken={},
    ).model_dump(mode="python")
