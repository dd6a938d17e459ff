from aoc_star.core.remote.abc import AdventOfCode
from aoc_star.core.remote.disabled import DisabledAdventOfCode
from aoc_star.core.remote.fake import FakeAdventOfCode
from aoc_star.core.remote.real import RealAdventOfCode
from aoc_star.core.remote.types import SubmitOutcome, SubmitStatus

__all__ = [
    "AdventOfCode",
    "DisabledAdventOfCode",
    "FakeAdventOfCode",
    "RealAdventOfCode",
    "SubmitOutcome",
    "SubmitStatus",
]
