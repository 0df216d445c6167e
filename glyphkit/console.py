"""Shared Rich console instances for CLI output."""

from rich.console import Console

console = Console()
# Diagnostics go to stderr so `glyphkit export` can stream bytes to stdout
err_console = Console(stderr=True)

__all__ = ["console", "err_console"]
