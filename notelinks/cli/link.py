"""Link Typer app factory."""

import typer

from notelinks.api.link.cmd_classify import cmd_classify
from notelinks.api.link.cmd_follow import cmd_follow
from notelinks.api.link.cmd_resolve import cmd_resolve
from notelinks.cli._handle_stage_result import handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Classify, resolve and follow link references",
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

    @app.command(name="classify")
    def classify_cmd(
        reference: str = typer.Argument(..., help="Link target as written in the document"),
    ) -> None:
        """Show the kind of a link reference."""
        handle_stage_result(cmd_classify)(reference)

    @app.command(name="resolve")
    def resolve_cmd(
        reference: str = typer.Argument(..., help="Link target as written in the document"),
        current_file: str | None = typer.Option(None, "--from", "-f", help="Document containing the link"),
        relative_to: str | None = typer.Option(
            None, "--relative-to", "-r", help="Anchor for relative links: root, first or current"
        ),
    ) -> None:
        """Resolve a link reference to a path without side effects."""
        handle_stage_result(cmd_resolve)(reference, current_file=current_file, relative_to=relative_to)

    @app.command(name="follow")
    def follow_cmd(
        reference: str = typer.Argument(..., help="Link target as written in the document"),
        current_file: str | None = typer.Option(None, "--from", "-f", help="Document containing the link"),
        relative_to: str | None = typer.Option(
            None, "--relative-to", "-r", help="Anchor for relative links: root, first or current"
        ),
        create_dirs: bool | None = typer.Option(
            None, "--create-dirs/--no-create-dirs", help="Create missing directories (default from config)"
        ),
    ) -> None:
        """Follow a link reference."""
        handle_stage_result(cmd_follow)(
            reference,
            current_file=current_file,
            relative_to=relative_to,
            create_dirs=create_dirs,
        )

    return app
