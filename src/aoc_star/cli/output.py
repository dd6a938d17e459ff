"""Output utilities for CLI commands with clear intent.

user_output goes to stderr (diagnostics, prompts, errors); machine_output
goes to stdout and carries only the answer, so `aoc-star -d 1 > answer.txt`
stays clean.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Print a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Print a result to stdout."""
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Print message with a red "Error: " prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
