"""Command-line interface for afmkit.

This module provides the CLI using Typer with rich output for
readable summaries of AFM files.

Key features:
- Font header summary (info)
- Character metric and kerning tables (chars, kerning)
- JSON export of the parsed model (dump)
- Detailed error reporting with line numbers
"""

from afmkit.cli.app import cli, main

__all__ = ["cli", "main"]
