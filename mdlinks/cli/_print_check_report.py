"""Human-readable report for link check output."""

from .display import CLIDisplay


def _print_check_report(output: dict) -> None:
    """Print totals and a table of broken links per file to stderr."""
    display = CLIDisplay()
    display.info("")
    display.info("[bold]====== RESULTS ======[/bold]")
    display.info(f"Total links checked: {output['total_links']}")
    display.info(f"Broken links found: {output['broken_count']}")
    display.info(f"Links skipped: {output['skipped_count']}")

    for file, entries in output["broken"].items():
        rows = [
            {
                "line": entry["line_number"],
                "link": entry["link"],
                "reason": f"Status: {entry['status_code']}" if entry["status_code"] else entry["error"] or "Not found",
            }
            for entry in entries
        ]
        display.table(rows, ["line", "link", "reason"], title=f"File: {file}")
