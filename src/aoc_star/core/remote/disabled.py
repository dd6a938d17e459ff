"""Disabled Advent of Code client, selected when running offline."""

from aoc_star.core.errors import RemoteDisabledError
from aoc_star.core.remote.abc import AdventOfCode
from aoc_star.core.remote.types import SubmitOutcome


class DisabledAdventOfCode(AdventOfCode):
    """Client that refuses every remote operation.

    Used when the config sets offline = true or AOC_STAR_OFFLINE is set, so
    callers get RemoteDisabledError instead of a network failure.
    """

    def is_enabled(self) -> bool:
        return False

    def fetch_input(self, year: int, day: int, token: str) -> str:
        raise RemoteDisabledError("fetch puzzle input")

    def submit_answer(
        self, year: int, day: int, part: int, answer: str, token: str
    ) -> SubmitOutcome:
        raise RemoteDisabledError("submit answer")
