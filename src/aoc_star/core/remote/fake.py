"""In-memory fake implementation of the Advent of Code client for testing."""

from aoc_star.core.errors import RemoteRequestError
from aoc_star.core.remote.abc import AdventOfCode
from aoc_star.core.remote.types import SubmitOutcome, SubmitStatus


class FakeAdventOfCode(AdventOfCode):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    Calls are recorded for test assertions.
    """

    def __init__(
        self,
        *,
        inputs: dict[tuple[int, int], str] | None = None,
        outcome: SubmitOutcome | None = None,
        submit_error: Exception | None = None,
    ) -> None:
        """Create FakeAdventOfCode with pre-configured state.

        Args:
            inputs: Mapping of (year, day) -> input text. Unknown keys fail like a 404.
            outcome: Outcome returned by every submit (default: CORRECT)
            submit_error: Exception raised by submit_answer instead of returning
        """
        self._inputs = inputs or {}
        self._outcome = outcome or SubmitOutcome(
            status=SubmitStatus.CORRECT, message="That's the right answer!"
        )
        self._submit_error = submit_error
        self._fetch_calls: list[tuple[int, int, str]] = []
        self._submissions: list[tuple[int, int, int, str]] = []

    @property
    def fetch_calls(self) -> list[tuple[int, int, str]]:
        """Read-only access to fetches for test assertions.

        Returns list of (year, day, token) tuples.
        """
        return self._fetch_calls

    @property
    def submissions(self) -> list[tuple[int, int, int, str]]:
        """Read-only access to submissions for test assertions.

        Returns list of (year, day, part, answer) tuples.
        """
        return self._submissions

    def is_enabled(self) -> bool:
        return True

    def fetch_input(self, year: int, day: int, token: str) -> str:
        self._fetch_calls.append((year, day, token))
        if (year, day) not in self._inputs:
            url = f"https://adventofcode.com/{year}/day/{day}/input"
            raise RemoteRequestError(url, 404, f"puzzle {year}/{day:02d} is not available yet")
        return self._inputs[(year, day)]

    def submit_answer(
        self, year: int, day: int, part: int, answer: str, token: str
    ) -> SubmitOutcome:
        self._submissions.append((year, day, part, answer))
        if self._submit_error is not None:
            raise self._submit_error
        return self._outcome
