"""Abstract interface for the Advent of Code remote service."""

from abc import ABC, abstractmethod

from aoc_star.core.remote.types import SubmitOutcome


class AdventOfCode(ABC):
    """Fetches puzzle inputs and submits answers.

    All implementations (real, disabled and fake) must implement this interface.
    Tokens are passed per call so credential checks stay with the caller.
    """

    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether remote operations can be attempted at all.

        Callers check this before resolving credentials so a disabled client is
        reported as RemoteDisabledError rather than MissingCredentialError.
        """
        ...

    def close(self) -> None:
        """Release network resources. Nothing to release by default."""

    @abstractmethod
    def fetch_input(self, year: int, day: int, token: str) -> str:
        """Download the puzzle input for (year, day).

        Args:
            year: Event year
            day: Puzzle day (1-25)
            token: Session cookie value

        Returns:
            The input text, unmodified

        Raises:
            RemoteDisabledError: If the client is disabled
            RemoteRequestError: If the request fails or returns an error status
        """
        ...

    @abstractmethod
    def submit_answer(
        self, year: int, day: int, part: int, answer: str, token: str
    ) -> SubmitOutcome:
        """Post an answer for (year, day, part).

        Returns:
            The outcome reported by the site

        Raises:
            RemoteDisabledError: If the client is disabled
            RemoteRequestError: If the request fails or returns an error status
        """
        ...
