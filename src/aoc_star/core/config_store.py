"""Config file storage.

Two TOML files may hold settings, searched in this order:

1. ``aoc-star.toml`` in the current working directory (local config)
2. ``$XDG_CONFIG_HOME/aoc-star/config.toml`` (global config, default
   ``~/.config/aoc-star/config.toml``)

Example:

    token = "53616c7465645f5f..."
    year = 2024
    offline = false
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from aoc_star.core.errors import InvalidConfigError

LOCAL_CONFIG_NAME = "aoc-star.toml"


@dataclass(frozen=True)
class Config:
    """Immutable contents of one config file. Missing keys are None."""

    token: str | None = None
    year: int | None = None
    offline: bool = False


def default_global_config_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "aoc-star" / "config.toml"


def parse_config(text: str, source: Path) -> Config:
    """Parse TOML text into a Config.

    Raises:
        InvalidConfigError: If the document is malformed or a key has the wrong type
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(source, str(e)) from e

    token = data.get("token")
    if token is not None and not isinstance(token, str):
        raise InvalidConfigError(source, "'token' must be a string")

    year = data.get("year")
    if year is not None and (isinstance(year, bool) or not isinstance(year, int)):
        raise InvalidConfigError(source, "'year' must be an integer")

    offline = data.get("offline", False)
    if not isinstance(offline, bool):
        raise InvalidConfigError(source, "'offline' must be a boolean")

    return Config(token=token, year=year, offline=offline)


def render_config(config: Config) -> str:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("aoc-star configuration"))
    doc["token"] = config.token or ""
    if config.year is not None:
        doc["year"] = config.year
    if config.offline:
        doc["offline"] = True
    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for reading and writing config files.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def load_local(self) -> Config | None:
        """Load the config from the current directory, or None if absent."""
        ...

    @abstractmethod
    def load_global(self) -> Config | None:
        """Load the per-user global config, or None if absent."""
        ...

    @abstractmethod
    def save_local(self, config: Config) -> Path:
        """Write the local config. Returns the path written."""
        ...

    @abstractmethod
    def save_global(self, config: Config) -> Path:
        """Write the global config. Returns the path written."""
        ...

    @abstractmethod
    def local_path(self) -> Path:
        """Path of the local config file (for messages)."""
        ...

    @abstractmethod
    def global_path(self) -> Path:
        """Path of the global config file (for messages)."""
        ...


class RealConfigStore(ConfigStore):
    """Production implementation backed by TOML files on disk."""

    def __init__(self, cwd: Path, global_path: Path | None = None) -> None:
        self._cwd = cwd
        if global_path is None:
            global_path = default_global_config_path()
        self._global_path = global_path

    def load_local(self) -> Config | None:
        return self._load(self.local_path())

    def load_global(self) -> Config | None:
        return self._load(self.global_path())

    def save_local(self, config: Config) -> Path:
        return self._save(self.local_path(), config)

    def save_global(self, config: Config) -> Path:
        return self._save(self.global_path(), config)

    def local_path(self) -> Path:
        return self._cwd / LOCAL_CONFIG_NAME

    def global_path(self) -> Path:
        return self._global_path

    def _load(self, path: Path) -> Config | None:
        if not path.exists():
            return None
        return parse_config(path.read_text(encoding="utf-8"), path)

    def _save(self, path: Path, config: Config) -> Path:
        """Write config to path, creating the parent directory.

        Raises:
            PermissionError: If the directory or file cannot be written
        """
        parent = path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable.\n\n"
                f"To fix this manually:\n"
                f"  1. Make it writable: chmod 755 {parent}\n"
                f"  2. Run aoc-star --setup again"
            )

        try:
            parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise PermissionError(
                f"Cannot create directory: {parent}\n"
                f"Check permissions on your home directory.\n\n"
                f"To fix this manually:\n"
                f"  1. Create the directory: mkdir -p {parent}\n"
                f"  2. Run aoc-star --setup again"
            ) from None

        if path.exists() and not os.access(path, os.W_OK):
            raise PermissionError(
                f"Cannot write to file: {path}\n"
                f"The file exists but is not writable.\n\n"
                f"To fix this manually:\n"
                f"  1. Make it writable: chmod 644 {path}\n"
                f"  2. Run aoc-star --setup again"
            )

        path.write_text(render_config(config), encoding="utf-8")
        return path


class FakeConfigStore(ConfigStore):
    """Test implementation that keeps both configs in memory."""

    def __init__(
        self,
        *,
        local_config: Config | None = None,
        global_config: Config | None = None,
    ) -> None:
        """Initialize in-memory config store.

        Args:
            local_config: Initial local config (None = no local file)
            global_config: Initial global config (None = no global file)
        """
        self._local = local_config
        self._global = global_config
        self._saved: list[tuple[str, Config]] = []

    @property
    def saved(self) -> list[tuple[str, Config]]:
        """Read-only access to saves for test assertions.

        Returns list of ("local" | "global", config) tuples.
        """
        return self._saved

    def load_local(self) -> Config | None:
        return self._local

    def load_global(self) -> Config | None:
        return self._global

    def save_local(self, config: Config) -> Path:
        self._local = config
        self._saved.append(("local", config))
        return self.local_path()

    def save_global(self, config: Config) -> Path:
        self._global = config
        self._saved.append(("global", config))
        return self.global_path()

    def local_path(self) -> Path:
        return Path("/fake/cwd") / LOCAL_CONFIG_NAME

    def global_path(self) -> Path:
        return Path("/fake/config/aoc-star/config.toml")
