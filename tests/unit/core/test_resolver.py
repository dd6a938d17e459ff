"""Tests for resolving a query to a registered entry."""

import pytest

from aoc_star.core.entry import Entry, Query
from aoc_star.core.errors import SolutionNotFoundError
from aoc_star.core.registry import Registry
from aoc_star.core.resolver import resolve
from tests.test_utils.registries import answer, scenario_registry


class StaticYear:
    """Year defaults that count how often they are consulted."""

    def __init__(self, year: int) -> None:
        self.year = year
        self.calls = 0

    def default_year(self) -> int:
        self.calls += 1
        return self.year


def _registry(*entries: Entry) -> Registry:
    registry = Registry()
    for entry in entries:
        registry.register(entry)
    return registry.freeze()


def test_exact_match_is_returned() -> None:
    """Test that an entry for the exact day, part and year is selected."""
    match = resolve(scenario_registry(), Query(day=3, part=1, year=2024), StaticYear(2030))

    assert match.entry.solve("x") == "answer-3-1-2024"
    assert match.year == 2024
    assert match.is_exact is True


def test_part_distinguishes_entries() -> None:
    """Test that part 2 resolves to the part 2 entry."""
    match = resolve(scenario_registry(), Query(day=3, part=2, year=2024), StaticYear(2030))

    assert match.entry.solve("x") == "answer-3-2-2024"


def test_year_agnostic_entry_answers_any_year() -> None:
    """Test that a year-agnostic entry is used when no exact entry exists."""
    registry = scenario_registry()

    for year in (2015, 2024, 2025):
        match = resolve(registry, Query(day=1, part=1, year=year), StaticYear(2030))
        assert match.entry.solve("x") == "answer-1-1-any"
        assert match.year == year
        assert match.entry.year is None
        assert match.is_exact is False


def test_exact_match_beats_earlier_year_agnostic_entry() -> None:
    """Test that an exact entry wins even when registered after the fallback."""
    registry = _registry(
        Entry(day=7, part=1, year=None, solve=answer("generic")),
        Entry(day=7, part=1, year=2022, solve=answer("specific")),
    )

    match = resolve(registry, Query(day=7, part=1, year=2022), StaticYear(2030))

    assert match.entry.solve("") == "specific"


def test_exact_match_beats_later_year_agnostic_entry() -> None:
    """Test that an exact entry wins when registered before the fallback."""
    registry = _registry(
        Entry(day=7, part=1, year=2022, solve=answer("specific")),
        Entry(day=7, part=1, year=None, solve=answer("generic")),
    )

    match = resolve(registry, Query(day=7, part=1, year=2022), StaticYear(2030))

    assert match.entry.solve("") == "specific"


def test_other_year_entry_is_not_used() -> None:
    """Test that an entry for a different year does not match, the fallback does."""
    registry = _registry(
        Entry(day=7, part=1, year=2021, solve=answer("2021")),
        Entry(day=7, part=1, year=None, solve=answer("generic")),
    )

    match = resolve(registry, Query(day=7, part=1, year=2022), StaticYear(2030))

    assert match.entry.solve("") == "generic"


def test_first_year_agnostic_duplicate_wins() -> None:
    """Test that among duplicate year-agnostic entries the first registered wins."""
    registry = _registry(
        Entry(day=9, part=2, year=None, solve=answer("A")),
        Entry(day=9, part=2, year=None, solve=answer("B")),
    )

    match = resolve(registry, Query(day=9, part=2, year=2023), StaticYear(2030))

    assert match.entry.solve("") == "A"


def test_later_exact_entry_beats_duplicate_year_agnostic_entries() -> None:
    """Test that an exact entry registered after duplicate fallbacks still wins."""
    registry = _registry(
        Entry(day=9, part=2, year=None, solve=answer("A")),
        Entry(day=9, part=2, year=None, solve=answer("B")),
        Entry(day=9, part=2, year=2023, solve=answer("exact")),
    )

    match = resolve(registry, Query(day=9, part=2, year=2023), StaticYear(2030))

    assert match.entry.solve("") == "exact"


def test_first_exact_duplicate_wins() -> None:
    """Test that scanning stops at the first exact entry."""
    registry = _registry(
        Entry(day=4, part=1, year=2020, solve=answer("first")),
        Entry(day=4, part=1, year=2020, solve=answer("second")),
    )

    match = resolve(registry, Query(day=4, part=1, year=2020), StaticYear(2030))

    assert match.entry.solve("") == "first"


def test_not_found_names_requested_coordinates() -> None:
    """Test that a query with no candidate fails naming day, part and year."""
    with pytest.raises(SolutionNotFoundError) as exc_info:
        resolve(scenario_registry(), Query(day=2, part=1, year=2018), StaticYear(2030))

    error = exc_info.value
    assert (error.day, error.part, error.year) == (2, 1, 2018)
    assert str(error) == "No solution found for Day 2 Part 1 of Year 2018"


def test_not_found_when_only_other_part_exists() -> None:
    """Test that an entry for another part never matches."""
    with pytest.raises(SolutionNotFoundError):
        resolve(scenario_registry(), Query(day=1, part=2, year=2024), StaticYear(2030))


def test_not_found_on_empty_registry_reports_default_year() -> None:
    """Test that the effective year in the error is the default year when none was given."""
    with pytest.raises(SolutionNotFoundError) as exc_info:
        resolve(Registry().freeze(), Query(day=1), StaticYear(2019))

    assert exc_info.value.year == 2019
    assert exc_info.value.part == 1


def test_default_year_used_when_query_has_none() -> None:
    """Test that the configured default year drives the exact match."""
    registry = _registry(
        Entry(day=1, part=1, year=2023, solve=answer("2023")),
        Entry(day=1, part=1, year=2024, solve=answer("2024")),
    )
    defaults = StaticYear(2024)

    match = resolve(registry, Query(day=1), defaults)

    assert match.entry.solve("") == "2024"
    assert match.year == 2024
    assert defaults.calls == 1


def test_default_year_not_consulted_when_query_has_year() -> None:
    """Test that an explicit year skips the config lookup."""
    defaults = StaticYear(2024)

    resolve(scenario_registry(), Query(day=3, part=1, year=2024), defaults)

    assert defaults.calls == 0


def test_resolution_is_idempotent() -> None:
    """Test that repeated resolution returns the same entry."""
    registry = scenario_registry()
    query = Query(day=1, part=1, year=2025)

    first = resolve(registry, query, StaticYear(2030))
    second = resolve(registry, query, StaticYear(2030))

    assert first == second
    assert first.entry is second.entry