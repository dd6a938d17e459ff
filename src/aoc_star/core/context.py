"""Application context with dependency injection."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from aoc_star.core.config_provider import TOKEN_ENV_VAR, ConfigProvider, offline_from_env
from aoc_star.core.config_store import Config, ConfigStore, RealConfigStore
from aoc_star.core.errors import InvalidConfigError
from aoc_star.core.input_cache import FilesystemInputCache, InputCache
from aoc_star.core.input_provider import InputProvider
from aoc_star.core.registry import Registry
from aoc_star.core.remote.abc import AdventOfCode
from aoc_star.core.remote.disabled import DisabledAdventOfCode
from aoc_star.core.remote.real import RealAdventOfCode
from aoc_star.core.time.abc import Time
from aoc_star.core.time.real import RealTime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AocStarContext:
    """Immutable context holding all dependencies for a run.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: Registry
    remote: AdventOfCode
    cache: InputCache
    config_store: ConfigStore
    config: ConfigProvider
    time: Time
    cwd: Path  # Current working directory at CLI invocation

    @property
    def input_provider(self) -> InputProvider:
        return InputProvider(self.cache, self.remote, self.config)

    @staticmethod
    def for_test(
        registry: Registry | None = None,
        remote: AdventOfCode | None = None,
        cache: InputCache | None = None,
        config_store: ConfigStore | None = None,
        time: Time | None = None,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> "AocStarContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            registry: Optional Registry. If None, creates an empty frozen registry.
            remote: Optional AdventOfCode implementation. If None, creates empty
                FakeAdventOfCode.
            cache: Optional InputCache. If None, creates empty FakeInputCache.
            config_store: Optional ConfigStore. If None, creates FakeConfigStore with a
                global config holding a test token.
            time: Optional Time. If None, creates FakeTime (2024-12-01).
            environ: Optional environment mapping. If None, uses an empty mapping so
                the real environment never leaks into tests.
            cwd: Optional current working directory. If None, uses Path("/test/cwd").

        Returns:
            AocStarContext configured with provided values and test defaults

        Example:
            >>> registry = Registry()
            >>> registry.register(Entry(day=1, part=1, year=None, solve=len))
            >>> remote = FakeAdventOfCode(inputs={(2024, 1): "abc"})
            >>> ctx = AocStarContext.for_test(registry=registry, remote=remote)
        """
        from aoc_star.core.config_store import FakeConfigStore
        from aoc_star.core.input_cache import FakeInputCache
        from aoc_star.core.remote.fake import FakeAdventOfCode
        from aoc_star.core.time.fake import FakeTime

        if registry is None:
            registry = Registry().freeze()

        if remote is None:
            remote = FakeAdventOfCode()

        if cache is None:
            cache = FakeInputCache()

        if config_store is None:
            config_store = FakeConfigStore(global_config=Config(token="test-session-token"))

        if time is None:
            time = FakeTime()

        if environ is None:
            environ = {}

        return AocStarContext(
            registry=registry,
            remote=remote,
            cache=cache,
            config_store=config_store,
            config=ConfigProvider(config_store, time, environ),
            time=time,
            cwd=cwd or Path("/test/cwd"),
        )


def ensure_global_config(store: ConfigStore, environ: Mapping[str, str]) -> None:
    """Create the global config from the environment if it does not exist yet.

    The token comes from AOC_TOKEN; the year is left unset so the default keeps
    following the calendar. An existing global file is never touched, even when
    it is invalid; `aoc-star --setup` replaces it.
    """
    try:
        if store.load_global() is not None:
            return
    except InvalidConfigError as e:
        logger.warning("Keeping invalid global config: %s", e)
        return
    token = environ.get(TOKEN_ENV_VAR, "").strip() or None
    try:
        path = store.save_global(Config(token=token))
    except OSError as e:
        logger.warning("Could not create global config at %s: %s", store.global_path(), e)
        return
    logger.info("Created global config at %s", path)


def create_context(registry: Registry) -> AocStarContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        registry: The fully built (frozen) solution registry

    Returns:
        AocStarContext with real implementations. The remote client is the
        disabled implementation when the config or environment says offline.
    """
    # 1. Capture cwd and environment (no deps)
    cwd = Path.cwd()
    environ = os.environ

    # 2. Config store; bootstrap the global file on first run
    config_store = RealConfigStore(cwd)
    ensure_global_config(config_store, environ)

    # 3. Resolved settings
    time: Time = RealTime()
    config = ConfigProvider(config_store, time, environ)

    # 4. Remote client selected by configuration. An invalid config file is
    # reported when a setting is read, so only the environment decides here.
    try:
        remote_enabled = config.remote_enabled()
    except InvalidConfigError as e:
        logger.warning("Selecting remote client from environment only: %s", e)
        remote_enabled = not offline_from_env(environ)

    remote: AdventOfCode
    if remote_enabled:
        remote = RealAdventOfCode()
    else:
        logger.debug("Remote client disabled by configuration")
        remote = DisabledAdventOfCode()

    if not registry.frozen:
        registry.freeze()

    return AocStarContext(
        registry=registry,
        remote=remote,
        cache=FilesystemInputCache(),
        config_store=config_store,
        config=config,
        time=time,
        cwd=cwd,
    )
