"""Obtaining the puzzle input for a resolved entry."""

import logging
from pathlib import Path

from aoc_star.core.config_provider import ConfigProvider
from aoc_star.core.entry import ResolvedMatch
from aoc_star.core.errors import InputIOError, MissingCredentialError, RemoteDisabledError
from aoc_star.core.input_cache import InputCache
from aoc_star.core.remote.abc import AdventOfCode

logger = logging.getLogger(__name__)


def read_input_file(path: Path) -> str:
    """Read an explicit input file verbatim.

    Raises:
        InputIOError: If the file cannot be read
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputIOError(path, e) from e


class InputProvider:
    """Reads an explicit input file, or the cache backed by the remote client."""

    def __init__(self, cache: InputCache, remote: AdventOfCode, config: ConfigProvider) -> None:
        self._cache = cache
        self._remote = remote
        self._config = config

    def get_input(self, match: ResolvedMatch, input_file: Path | None = None) -> str:
        """Return the input text for match.

        With input_file the file is the only source; the remote is never
        consulted. Otherwise a cached input for (day, effective year) is
        returned as-is, and on a miss the input is fetched and cached first.

        Raises:
            InputIOError: If the file or cache entry cannot be read or written
            MissingCredentialError: If a fetch is needed and no token is configured
            RemoteDisabledError: If a fetch is needed and the remote client is disabled
            RemoteRequestError: If the fetch fails
        """
        if input_file is not None:
            logger.debug("Reading input from %s", input_file)
            return read_input_file(input_file)

        day, year = match.day, match.year
        cached = self._cache.read(day, year)
        if cached is not None:
            return cached

        if not self._remote.is_enabled():
            raise RemoteDisabledError("fetch puzzle input")

        token = self._config.credential_token()
        if token is None:
            raise MissingCredentialError("fetch puzzle input")

        text = self._remote.fetch_input(year, day, token)
        self._cache.write(day, year, text)
        return text
