"""Collection management commands.

Shows the registered collections and edits the ``collections:`` section of
settings.yaml so that project or user asset folders become searchable.
"""

from __future__ import annotations

import sys

import click
from rich.table import Table

from ..console import console
from ..console import err_console
from ..errors import AssetError
from ..paths import create_asset_registry
from ..schema import CollectionConfig
from ..settings import AppSettings
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message


def _scope_option(default: str):
    return click.option(
        "--scope",
        type=click.Choice(["local", "project", "global"]),
        default=default,
        show_default=True,
        help="Settings scope to modify",
    )


@click.group(invoke_without_command=True)
@click.pass_context
def collections(ctx: click.Context):
    """Show and manage asset collections.

    Without a subcommand, lists the registered collections.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(collections_list)


@collections.command(name="list")
def collections_list():
    """List registered collections with their asset counts."""
    try:
        registry = create_asset_registry()
    except AssetError as e:
        err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        sys.exit(1)

    if not len(registry):
        console.print("[dim]No asset collections registered.[/dim]")
        return

    table = Table(title="Asset Collections")
    table.add_column("Name", style="cyan")
    table.add_column("Prefix", style="dim")
    table.add_column("Extensions", style="green")
    table.add_column("Assets", justify="right")

    for collection in registry:
        table.add_row(
            escape_markup(collection.name),
            escape_markup(collection.prefix),
            ", ".join(collection.spec.extensions),
            str(len(collection)),
        )

    console.print(table)


@collections.command(name="add")
@click.argument("name")
@click.argument("path", type=click.Path(file_okay=False, path_type=str))
@click.option("--prefix", required=True, help="Identifier prefix, e.g. acme.icons")
@click.option(
    "--ext",
    "extensions",
    multiple=True,
    default=(".svg",),
    show_default=True,
    help="Recognized extension (repeatable, preferred first)",
)
@click.option("--description", default="", help="Human-readable description")
@click.option("--folder-alias", default="", help="Leading folder name accepted in asset paths (e.g. the collection name)")
@_scope_option("project")
def collections_add(
    name: str, path: str, prefix: str, extensions: tuple[str, ...], description: str, folder_alias: str, scope: str
):
    """Declare a collection NAME backed by the directory PATH.

    Relative paths are stored as given and resolved against the folder that
    holds .glyphkit/ (your home directory for --scope global).

    Example:

        \b
        glyphkit collections add brand assets/icons --prefix acme.icons
    """
    config = CollectionConfig(
        prefix=prefix,
        path=path,
        extensions=list(extensions),
        description=description,
        folder_alias=folder_alias,
    )
    try:
        config.to_spec(name)
    except ValueError as e:
        err_console.print(f"[red]Invalid collection:[/red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(1)

    AppSettings().add_collection(name, config, scope=scope)  # type: ignore[arg-type]
    console.print(f"[green]✓ Added collection '{escape_markup(name)}' ({scope})[/green]")


@collections.command(name="remove")
@click.argument("name")
@_scope_option("project")
def collections_remove(name: str, scope: str):
    """Remove the collection NAME from settings."""
    if AppSettings().remove_collection(name, scope=scope):  # type: ignore[arg-type]
        console.print(f"[green]✓ Removed collection '{escape_markup(name)}' ({scope})[/green]")
        return

    err_console.print(f"[yellow]Collection '{escape_markup(name)}' is not declared in {scope} settings[/yellow]")
    sys.exit(1)
