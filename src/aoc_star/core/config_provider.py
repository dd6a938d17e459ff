"""Resolved settings: default year, session token and remote availability.

Every read walks the same priority order: local config file, global config
file, then the environment (token and offline flag only). The default year
falls back to the current calendar year.
"""

import logging
from collections.abc import Mapping

from aoc_star.core.config_store import Config, ConfigStore
from aoc_star.core.time.abc import Time

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "AOC_TOKEN"
OFFLINE_ENV_VAR = "AOC_STAR_OFFLINE"

_FALSY = {"", "0", "false", "no", "off"}


def redact_token(token: str) -> str:
    return "..." + token[-4:]


def offline_from_env(environ: Mapping[str, str]) -> bool:
    """Whether AOC_STAR_OFFLINE is set to a truthy value."""
    return environ.get(OFFLINE_ENV_VAR, "").strip().lower() not in _FALSY


class ConfigProvider:
    """Read-only view over the config store and the environment.

    Config files are loaded on first use and memoized for the lifetime of the
    provider.
    """

    def __init__(self, store: ConfigStore, time: Time, environ: Mapping[str, str]) -> None:
        self._store = store
        self._time = time
        self._environ = environ
        self._configs: tuple[Config, ...] | None = None

    def _layers(self) -> tuple[Config, ...]:
        if self._configs is None:
            layers = (self._store.load_local(), self._store.load_global())
            self._configs = tuple(config for config in layers if config is not None)
        return self._configs

    def default_year(self) -> int:
        for config in self._layers():
            if config.year is not None:
                return config.year
        year = self._time.now().year
        logger.debug("No year configured, defaulting to current year %d", year)
        return year

    def credential_token(self) -> str | None:
        for config in self._layers():
            if config.token and config.token.strip():
                return config.token.strip()
        token = self._environ.get(TOKEN_ENV_VAR, "").strip()
        if token:
            logger.debug("Using session token from %s", TOKEN_ENV_VAR)
            return token
        return None

    def remote_enabled(self) -> bool:
        if any(config.offline for config in self._layers()):
            return False
        return not offline_from_env(self._environ)
