"""Output formatting utilities for the CLI and the interactive session."""

from __future__ import annotations

import sys
from typing import NoReturn

import rich_click as click

from moonshell.core.types import Values


def print_values(outcome: Values) -> None:
    """Print one result line: display strings joined by tabs.

    A submission that returned nothing prints an empty line.
    """
    click.echo(outcome.render())


def print_evaluation_error(message: str) -> None:
    """Report a recoverable session error on stderr."""
    click.echo(f"error: {message}", err=True)


def error_exit(message: str, code: int = 1) -> NoReturn:
    """Print error message and exit with code."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)
