"""Command-line interface for kochflake.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Plain or anti-aliased rendering mode
- Headless mode for environments without a display
- Quiet output and optional log file
"""

from kochflake.cli.app import cli, main

__all__ = ["cli", "main"]
