"""Asset lookup commands: list, resolve and export.

Output meant for scripts (identifiers, file names, bytes) goes to stdout
through click; diagnostics go to stderr through Rich.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from ..console import err_console
from ..errors import AssetError
from ..errors import UnknownCollectionError
from ..paths import create_asset_registry
from ..resolver import AssetCollection
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message

logger = logging.getLogger(__name__)


def _get_collection(name: str) -> AssetCollection:
    """Look up a collection or exit with a readable error."""
    try:
        registry = create_asset_registry()
    except AssetError as e:
        err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        sys.exit(1)

    if name not in registry:
        err_console.print(f"[red]Error:[/red] {escape_markup(UnknownCollectionError(name, registry.names()))}")
        sys.exit(1)
    return registry.get(name)


@click.command(name="list")
@click.argument("collection")
@click.option("--files", "-f", "show_files", is_flag=True, help="List file names instead of identifiers")
@click.option("--match", "-m", "pattern", default=None, help="Only show entries containing TEXT (case-insensitive)")
def list_assets(collection: str, show_files: bool, pattern: str | None):
    """List the assets of COLLECTION.

    Examples:

        \b
        glyphkit list fonts
        glyphkit list uiicons --files --match user
    """
    assets = _get_collection(collection)
    entries = assets.file_names() if show_files else assets.resource_names()

    if pattern:
        needle = pattern.casefold()
        entries = tuple(e for e in entries if needle in e.casefold())

    if not entries:
        err_console.print(f"[dim]No assets found in '{escape_markup(collection)}'.[/dim]")
        return

    for entry in entries:
        click.echo(entry)


@click.command(name="resolve")
@click.argument("collection")
@click.argument("name")
@click.option("--quiet", "-q", is_flag=True, help="Print nothing; report through the exit code only")
def resolve_asset(collection: str, name: str, quiet: bool):
    """Resolve NAME to its canonical identifier in COLLECTION.

    NAME may be a file name (Cairo-Bold.ttf), a name without extension
    (Cairo-Bold), a folder path (Cairo/Cairo-Bold.ttf) or a full identifier.
    Exits with status 1 when nothing matches.
    """
    assets = _get_collection(collection)
    identifier = assets.resolve(name)

    if identifier is None:
        if not quiet:
            err_console.print(f"[red]Not found:[/red] {escape_markup(name)}")
        sys.exit(1)

    if not quiet:
        click.echo(identifier)


@click.command(name="export")
@click.argument("collection")
@click.argument("name")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=True),
    default=None,
    help="File or directory to write to (default: stdout)",
)
def export_asset(collection: str, name: str, output: str | None):
    """Write the bytes of asset NAME from COLLECTION.

    When --output is an existing directory or ends with a path separator,
    the asset is written inside it under its own file name.
    """
    assets = _get_collection(collection)

    try:
        data = assets.read_bytes(name)
    except AssetError as e:
        err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(1)

    if output is None:
        stream = click.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()
        return

    target = Path(output)
    if output.endswith(("/", "\\")) or target.is_dir():
        target = target / assets.file_name_of(assets.require(name))

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    logger.info(f"Exported {name} from '{collection}' to {target}")
    err_console.print(f"[green]✓ Wrote {len(data)} bytes to {escape_markup(target)}[/green]")
