"""Value types shared by the registry, resolver and dispatcher."""

from collections.abc import Callable
from dataclasses import dataclass

Solver = Callable[[str], object]


@dataclass(frozen=True)
class Entry:
    """A registered solution for one (day, part, year) key.

    year=None marks the entry as year-agnostic: it answers any year that has no
    more specific entry.
    """

    day: int
    part: int
    year: int | None
    solve: Solver

    @property
    def name(self) -> str:
        return getattr(self.solve, "__qualname__", repr(self.solve))

    @property
    def key(self) -> tuple[int, int, int | None]:
        return (self.day, self.part, self.year)


@dataclass(frozen=True)
class Query:
    """A request to run the solution for a day and part.

    year=None means "use the configured default year".
    """

    day: int
    part: int = 1
    year: int | None = None


@dataclass(frozen=True)
class ResolvedMatch:
    """The entry selected for a query plus the effective year it was matched for."""

    entry: Entry
    year: int

    @property
    def is_exact(self) -> bool:
        return self.entry.year == self.year

    @property
    def day(self) -> int:
        return self.entry.day

    @property
    def part(self) -> int:
        return self.entry.part
