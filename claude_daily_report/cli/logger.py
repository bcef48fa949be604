"""
CLI logger adapter - implements LoggerProtocol for command-line usage.

All messages go to stderr so they never end up inside a report piped to a
file. Info and warnings are shown only in verbose mode; errors always.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI (implements LoggerProtocol from protocols).

    Outputs messages with optional verbose mode.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize CLI logger.

        Args:
            verbose: If True, show info and warning messages. If False, only errors.
        """
        self.verbose = verbose

    async def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.secho(f'[INFO] {message}', fg=typer.colors.BRIGHT_BLACK, err=True)

    async def warning(self, message: str) -> None:
        """Log warning message (only if verbose, the CLI prints collected warnings itself)."""
        if self.verbose:
            typer.secho(f'[WARNING] {message}', fg=typer.colors.YELLOW, err=True)

    async def error(self, message: str) -> None:
        """Log error message."""
        typer.secho(f'[ERROR] {message}', fg=typer.colors.RED, err=True)
