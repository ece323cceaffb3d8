"""Link Typer app factory."""

import typer

from mdlinks.api.link.cmd_check import cmd_check
from mdlinks.api.link.cmd_extract import cmd_extract
from mdlinks.cli._handle_stage_result import _handle_stage_result
from mdlinks.cli._print_check_report import _print_check_report


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Extract and check markdown links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="extract")
    def extract_cmd(
        path: str = typer.Argument(..., help="Markdown file to read"),
    ) -> None:
        """List the links found in a markdown file without checking them."""
        _handle_stage_result(cmd_extract)(path=path)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Directory to scan recursively, or a single markdown file"),
        offline: bool = typer.Option(False, "--offline", help="Only check relative links; do not probe URLs"),
    ) -> None:
        """Check every link in markdown files and report broken ones."""
        _handle_stage_result(cmd_check, result_printer=_print_check_report)(path=path, offline=offline)

    return app
