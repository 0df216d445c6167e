"""CLI command groups for glyphkit."""
