"""Selecting the registered entry that answers a query."""

import logging
from typing import Protocol

from aoc_star.core.entry import Entry, Query, ResolvedMatch
from aoc_star.core.errors import SolutionNotFoundError
from aoc_star.core.registry import Registry

logger = logging.getLogger(__name__)


class YearDefaults(Protocol):
    def default_year(self) -> int: ...


def resolve(registry: Registry, query: Query, config: YearDefaults) -> ResolvedMatch:
    """Find the entry for query.

    The effective year is query.year, or config.default_year() when the query
    has none. Entries are scanned in registration order:

    - an entry for exactly (day, part, effective year) wins immediately;
    - otherwise the first year-agnostic entry for (day, part) is used.

    A later exact entry beats an earlier year-agnostic one. Among duplicate
    year-agnostic entries the first registered wins.

    Raises:
        SolutionNotFoundError: If neither an exact nor a year-agnostic entry exists
    """
    year = query.year if query.year is not None else config.default_year()

    fallback: Entry | None = None
    for entry in registry.all():
        if entry.day != query.day or entry.part != query.part:
            continue
        if entry.year == year:
            logger.debug(
                "Exact match for day=%d part=%d year=%d: %s",
                entry.day,
                entry.part,
                year,
                entry.name,
            )
            return ResolvedMatch(entry=entry, year=year)
        if entry.year is None and fallback is None:
            fallback = entry

    if fallback is None:
        raise SolutionNotFoundError(query.day, query.part, year)

    logger.debug(
        "Year-agnostic match for day=%d part=%d year=%d: %s",
        fallback.day,
        fallback.part,
        year,
        fallback.name,
    )
    return ResolvedMatch(entry=fallback, year=year)