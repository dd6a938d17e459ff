"""CLI error handling utilities with styled output.

Ensure asserts invariants in CLI code with consistent, user-friendly error
messages. All errors use the red "Error:" prefix and exit with code 1.
"""

from typing import TypeVar

from aoc_star.cli.output import error_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing from `T | None` to `T`.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            error_output(error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def positive(value: int, name: str) -> int:
        """Ensure an integer option is at least 1."""
        if value < 1:
            error_output(f"{name} must be a positive integer, got {value}")
            raise SystemExit(1)
        return value
