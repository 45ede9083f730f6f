"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from notelinks import __version__
    from notelinks.cli._create_app import _create_app
    from notelinks.utils.logger import configure_logging, get_logger

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"notelinks {__version__}")
        return 0

    configure_logging()
    logger = get_logger("cli")
    logger.debug(f"argv: {argv}")

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        logger.exception("Unhandled error")
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
