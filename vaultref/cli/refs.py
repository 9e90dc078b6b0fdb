"""Refs Typer app factory."""

import typer

from vaultref.api.refs.cmd_docs import cmd_docs
from vaultref.api.refs.cmd_edit import cmd_edit
from vaultref.api.refs.cmd_find import cmd_find
from vaultref.api.refs.cmd_rewrite import cmd_rewrite
from vaultref.api.refs.cmd_watch import cmd_watch
from vaultref.cli._handle_stage_result import _handle_stage_result


def refs() -> typer.Typer:
    """Create and configure the refs Typer app."""
    app = typer.Typer(
        name="refs",
        help="Image reference operations",
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

    @app.command(name="find")
    def find_cmd(asset: str = typer.Argument(..., help="Vault-relative path of the image")) -> None:
        """List every reference to an image."""
        _handle_stage_result(cmd_find)(asset)

    @app.command(name="docs")
    def docs_cmd(asset: str = typer.Argument(..., help="Vault-relative path of the image")) -> None:
        """List documents referencing an image, with its position in each."""
        _handle_stage_result(cmd_docs)(asset)

    @app.command(name="rewrite")
    def rewrite_cmd(
        old: str = typer.Argument(..., help="Previous path of the image"),
        new: str = typer.Argument(..., help="New path of the image"),
    ) -> None:
        """Point references at an image's new path."""
        _handle_stage_result(cmd_rewrite)(old, new)

    @app.command(name="edit")
    def edit_cmd(
        doc: str = typer.Argument(..., help="Document holding the reference"),
        line: int = typer.Argument(..., help="1-based line number"),
        asset: str = typer.Argument(..., help="Path of the referenced image"),
        text: str = typer.Option("", "--text", "-t", help="New caption"),
        width: int | None = typer.Option(None, "--width", help="New width"),
        height: int | None = typer.Option(None, "--height", help="New height"),
    ) -> None:
        """Change the caption or size of one reference."""
        _handle_stage_result(cmd_edit)(doc, line, asset, text, width=width, height=height)

    @app.command(name="watch")
    def watch_cmd() -> None:
        """Rewrite references as images are moved (until Ctrl-C)."""
        _handle_stage_result(cmd_watch)()

    return app
