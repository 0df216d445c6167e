"""glyphkit CLI - Look up and export bundled fonts and icons."""

import logging

import click

from .commands.assets import export_asset
from .commands.assets import list_assets
from .commands.assets import resolve_asset
from .commands.collections import collections
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(package_name="glyphkit")
@click.option(
    "--log-file",
    envvar="GLYPHKIT_LOG_PATH",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL log records to this file",
)
@click.option(
    "--log-level",
    envvar="GLYPHKIT_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Minimum level written to the log file",
)
@click.pass_context
def cli(ctx: click.Context, log_file: str | None, log_level: str):
    """glyphkit - bundled font and icon lookup.

    Names can be given as file names (Cairo-Bold.ttf), without extension
    (Cairo-Bold), folder-qualified (Cairo/Cairo-Bold.ttf) or as full
    identifiers (glyphkit.fonts.Cairo.Cairo-Bold.ttf).
    """
    if log_file:
        init_json_logging(log_file, log_level)
        logger.debug(f"Invoked subcommand: {ctx.invoked_subcommand}")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


cli.add_command(collections)
cli.add_command(list_assets)
cli.add_command(resolve_asset)
cli.add_command(export_asset)


def main():
    """Entry point for the glyphkit console script."""
    cli()


if __name__ == "__main__":
    main()
