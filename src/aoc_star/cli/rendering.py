"""Rendering of the registered entries table (--list) and submit outcomes."""

import click
from rich.table import Table

from aoc_star.core.entry import Entry
from aoc_star.core.registry import Registry
from aoc_star.core.remote.types import SubmitOutcome, SubmitStatus


def _year_cell(entry: Entry) -> str:
    return str(entry.year) if entry.year is not None else "any"


def build_entries_table(registry: Registry) -> Table:
    """One row per entry, ordered by day then part; ties keep registration order."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("day", justify="right", style="cyan", no_wrap=True)
    table.add_column("part", justify="right", no_wrap=True)
    table.add_column("year", no_wrap=True)
    table.add_column("solver", no_wrap=True)

    for entry in sorted(registry.all(), key=lambda e: (e.day, e.part)):
        table.add_row(str(entry.day), str(entry.part), _year_cell(entry), entry.name)
    return table


_OUTCOME_COLORS: dict[SubmitStatus, str | None] = {
    SubmitStatus.CORRECT: "green",
    SubmitStatus.INCORRECT: "red",
    SubmitStatus.ALREADY_COMPLETED: "yellow",
    SubmitStatus.TOO_RECENT: "red",
    SubmitStatus.WRONG_LEVEL: "yellow",
    SubmitStatus.UNKNOWN: None,
}


def format_outcome(outcome: SubmitOutcome) -> str:
    """Style the site's message by status, appending the wait time when known."""
    message = outcome.message or outcome.status.value
    if outcome.wait_seconds is not None:
        message = f"{message} (retry in {outcome.wait_seconds}s)"
    return click.style(message, fg=_OUTCOME_COLORS[outcome.status])
