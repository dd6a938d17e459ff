"""Types returned by the Advent of Code client."""

from dataclasses import dataclass
from enum import Enum


class SubmitStatus(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    ALREADY_COMPLETED = "already_completed"
    TOO_RECENT = "too_recent"
    WRONG_LEVEL = "wrong_level"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SubmitOutcome:
    """What adventofcode.com said about a submitted answer.

    wait_seconds is set only for TOO_RECENT, when the page states how long
    to wait before the next attempt.
    """

    status: SubmitStatus
    message: str
    wait_seconds: int | None = None

    @property
    def accepted(self) -> bool:
        return self.status is SubmitStatus.CORRECT
