"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from mdlinks.cli._create_app import _create_app
    from mdlinks.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from mdlinks.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"mdlinks {result.output['full_version']}")
        return 0

    configure_logging()

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except SystemExit as e:
        # Commands exit with their success status
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        return 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
