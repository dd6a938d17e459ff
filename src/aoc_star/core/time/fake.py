"""Fake Time implementation for testing.

FakeTime always reports the moment it was constructed with, so tests that
depend on the current year are stable.
"""

from datetime import UTC, datetime

from aoc_star.core.time.abc import Time


class FakeTime(Time):
    """In-memory fake returning a fixed moment.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            now: Moment to report (default: 2024-12-01 05:00 UTC, puzzle unlock time)
        """
        self._now = now if now is not None else datetime(2024, 12, 1, 5, 0, tzinfo=UTC)
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Number of now() calls, for test assertions."""
        return self._now_calls

    def now(self) -> datetime:
        self._now_calls += 1
        return self._now
