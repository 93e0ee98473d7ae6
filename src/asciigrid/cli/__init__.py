"""Command-line interface for asciigrid.

This module provides the CLI using Typer with Rich output on stderr, keeping
stdout for the rendered grid.

Key features:
- Shapes from repeatable --shape specs or a JSON scene file
- Configurable fill/mark characters and out-of-frame policy
- Verbose/quiet output modes
"""

from asciigrid.cli.app import cli, main

__all__ = ["cli", "main"]
