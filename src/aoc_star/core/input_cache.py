"""Persistent cache of puzzle inputs.

Puzzle inputs never change for a given user, so a cached input is returned
as-is forever. One plain text file is kept per (day, year):

    <root>/<year>/day<DD>.txt
"""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from aoc_star.core.errors import InputIOError

logger = logging.getLogger(__name__)


def default_cache_root() -> Path:
    cache_home = os.environ.get("XDG_CACHE_HOME")
    base = Path(cache_home) if cache_home else Path.home() / ".cache"
    return base / "aoc-star" / "inputs"


class InputCache(ABC):
    """Abstract interface for the input cache."""

    @abstractmethod
    def read(self, day: int, year: int) -> str | None:
        """Return the cached input, or None on a cache miss.

        Raises:
            InputIOError: If a cache entry exists but cannot be read
        """
        ...

    @abstractmethod
    def write(self, day: int, year: int, text: str) -> None:
        """Store text as the input for (day, year).

        Raises:
            InputIOError: If the entry cannot be written
        """
        ...

    @abstractmethod
    def path_for(self, day: int, year: int) -> Path:
        """Location of the entry for (day, year)."""
        ...


class FilesystemInputCache(InputCache):
    """Production implementation storing one file per (day, year)."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root if root is not None else default_cache_root()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, day: int, year: int) -> Path:
        return self._root / str(year) / f"day{day:02d}.txt"

    def read(self, day: int, year: int) -> str | None:
        path = self.path_for(day, year)
        if not path.exists():
            logger.debug("Input cache miss %s", path)
            return None
        try:
            # newline="" keeps the text byte-for-byte as fetched
            with path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputIOError(path, e) from e
        logger.debug("Input cache hit %s", path)
        return text

    def write(self, day: int, year: int, text: str) -> None:
        """Write via a temporary file in the same directory and an atomic rename.

        Concurrent readers see either no file or the complete file.
        """
        path = self.path_for(day, year)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                    f.write(text)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise InputIOError(path, e) from e
        logger.debug("Saved puzzle input to %s", path)


class FakeInputCache(InputCache):
    """In-memory implementation for tests.

    All initial state is provided via constructor; writes are tracked.
    """

    def __init__(self, *, entries: dict[tuple[int, int], str] | None = None) -> None:
        """Create FakeInputCache.

        Args:
            entries: Mapping of (day, year) -> cached input text
        """
        self._entries = dict(entries) if entries else {}
        self._writes: list[tuple[int, int, str]] = []

    @property
    def writes(self) -> list[tuple[int, int, str]]:
        """Read-only access to writes for test assertions.

        Returns list of (day, year, text) tuples.
        """
        return self._writes

    def read(self, day: int, year: int) -> str | None:
        return self._entries.get((day, year))

    def write(self, day: int, year: int, text: str) -> None:
        self._entries[(day, year)] = text
        self._writes.append((day, year, text))

    def path_for(self, day: int, year: int) -> Path:
        return Path("/fake/cache") / str(year) / f"day{day:02d}.txt"
