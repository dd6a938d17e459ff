"""Register Advent of Code solutions and run them from the command line.

    from aoc_star import Registry, run

    registry = Registry()

    @registry.star(day=1, part=1, year=2024)
    def historian_hysteria(puzzle_input: str) -> int:
        ...

    if __name__ == "__main__":
        run(registry)
"""

from aoc_star.cli.cli import run
from aoc_star.core.entry import Entry, Query, ResolvedMatch
from aoc_star.core.errors import (
    AocStarError,
    InputIOError,
    InvalidConfigError,
    MissingCredentialError,
    PublishError,
    RegistryFrozenError,
    RemoteDisabledError,
    RemoteRequestError,
    SolutionNotFoundError,
)
from aoc_star.core.registry import Registry, build_registry

__all__ = [
    "AocStarError",
    "Entry",
    "InputIOError",
    "InvalidConfigError",
    "MissingCredentialError",
    "PublishError",
    "Query",
    "RegistryFrozenError",
    "Registry",
    "RemoteDisabledError",
    "RemoteRequestError",
    "ResolvedMatch",
    "SolutionNotFoundError",
    "build_registry",
    "run",
]
