"""Registry of solution entries.

A Registry is populated once during startup, then frozen. Resolution only
ever reads it, so a frozen registry can be shared freely.

Solution modules expose a ``register(registry)`` function and decorate their
solvers with ``registry.star``:

    def register(registry: Registry) -> None:
        @registry.star(day=1, part=1, year=2024)
        def trebuchet(puzzle_input: str) -> int:
            ...

The program entry point then assembles them with ``build_registry``.
"""

import logging
from collections.abc import Callable, Iterator

from aoc_star.core.entry import Entry, Solver
from aoc_star.core.errors import RegistryFrozenError

logger = logging.getLogger(__name__)

Registrar = Callable[["Registry"], None]


class Registry:
    """Append-only collection of entries, kept in registration order."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, entry: Entry) -> None:
        """Append an entry.

        Duplicate (day, part, year) keys are accepted; the resolver keeps the
        first one registered.

        Raises:
            RegistryFrozenError: If freeze() was already called
        """
        if self._frozen:
            raise RegistryFrozenError(entry.day, entry.part, entry.year)

        for existing in self._entries:
            if existing.key == entry.key:
                logger.warning(
                    "Duplicate solution for day=%d part=%d year=%s: %s shadowed by earlier %s",
                    entry.day,
                    entry.part,
                    entry.year,
                    entry.name,
                    existing.name,
                )
                break

        logger.debug(
            "Registered %s for day=%d part=%d year=%s",
            entry.name,
            entry.day,
            entry.part,
            entry.year,
        )
        self._entries.append(entry)

    def star(self, *, day: int, part: int, year: int | None = None) -> Callable[[Solver], Solver]:
        """Decorator registering the wrapped function as a solution.

        The function is returned unchanged so it stays directly callable.
        """

        def decorator(solve: Solver) -> Solver:
            self.register(Entry(day=day, part=part, year=year, solve=solve))
            return solve

        return decorator

    def all(self) -> Iterator[Entry]:
        """Iterate over all entries in registration order.

        Each call starts a new pass over a snapshot of the entries.
        """
        return iter(tuple(self._entries))

    def freeze(self) -> "Registry":
        """End the registration phase. Further register() calls fail."""
        self._frozen = True
        return self

    def __iter__(self) -> Iterator[Entry]:
        return self.all()

    def __len__(self) -> int:
        return len(self._entries)


def build_registry(*registrars: Registrar) -> Registry:
    """Create a registry, run each registrar on it in order, then freeze it."""
    registry = Registry()
    for registrar in registrars:
        registrar(registry)
    logger.debug("Registry built with %d entries", len(registry))
    return registry.freeze()
