"""Error hierarchy for resolving, fetching, solving and publishing.

Every failure raised by the core derives from AocStarError and carries the
structured context needed to report it (day, part, year, path, cause).
The CLI catches AocStarError at the top level and turns it into a styled
message and exit code 1.
"""

from pathlib import Path


class AocStarError(Exception):
    """Base class for all aoc-star failures."""


class SolutionNotFoundError(AocStarError):
    """Raised when no registered entry matches the requested day/part/year."""

    def __init__(self, day: int, part: int, year: int) -> None:
        self.day = day
        self.part = part
        self.year = year
        super().__init__(f"No solution found for Day {day} Part {part} of Year {year}")


class InputIOError(AocStarError):
    """Raised when an input file or cached input cannot be read or written."""

    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = path
        self.cause = cause
        if isinstance(cause, UnicodeDecodeError):
            reason = "not valid UTF-8 text"
        else:
            reason = cause.strerror or str(cause)
        super().__init__(f"Cannot access input at {path}: {reason}")


class RemoteDisabledError(AocStarError):
    """Raised when a remote operation is attempted while the client is disabled.

    Distinct from RemoteRequestError: the fix is to supply an input file or
    re-enable the remote, not to check the network.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: the Advent of Code client is disabled. "
            "Pass --input-file, or unset 'offline' in your config and AOC_STAR_OFFLINE."
        )


class MissingCredentialError(AocStarError):
    """Raised before any remote call when no session token is configured."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation}: no session token configured. "
            "Run 'aoc-star --setup' or export AOC_TOKEN."
        )


class RemoteRequestError(AocStarError):
    """Raised when a request to adventofcode.com fails (transport or HTTP status)."""

    def __init__(self, url: str, status: int | None, detail: str) -> None:
        self.url = url
        self.status = status
        self.detail = detail
        if status is None:
            message = f"Request to {url} failed: {detail}"
        else:
            message = f"HTTP {status} at {url}: {detail}"
        super().__init__(message)


class PublishError(AocStarError):
    """Raised when submitting an answer fails.

    The computed answer is kept on the exception so callers can still show it.
    """

    def __init__(self, year: int, day: int, part: int, answer: str, cause: Exception) -> None:
        self.year = year
        self.day = day
        self.part = part
        self.answer = answer
        self.cause = cause
        super().__init__(
            f"Failed to submit answer for Day {day} Part {part} of Year {year}: {cause}"
        )


class RegistryFrozenError(AocStarError):
    """Raised when registering an entry after the registry was frozen."""

    def __init__(self, day: int, part: int, year: int | None) -> None:
        self.day = day
        self.part = part
        self.year = year
        super().__init__(
            f"Cannot register Day {day} Part {part} (year={year}): registry is frozen"
        )


class InvalidConfigError(AocStarError):
    """Raised when a config file exists but cannot be parsed."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")
