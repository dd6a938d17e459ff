from aoc_star.core.time.abc import Time
from aoc_star.core.time.fake import FakeTime
from aoc_star.core.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
