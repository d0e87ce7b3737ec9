"""Command-line interface for rebarfill.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Selection by selection store or explicit handle
- Dry-run mode listing the bars
- Detailed error reporting
"""

from rebarfill.cli.app import cli, main

__all__ = ["cli", "main"]
