"""Command-line interface for glyphmap.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Named glyph listing as a table or JSON
- Single codepoint lookup
- Bitmap export with progress reporting
- Detailed error reporting
"""

from glyphmap.cli.app import cli, main

__all__ = ["cli", "main"]
