"""Tests for TOML config storage."""

from pathlib import Path

import pytest

from aoc_star.core.config_store import (
    LOCAL_CONFIG_NAME,
    Config,
    FakeConfigStore,
    RealConfigStore,
    default_global_config_path,
    parse_config,
    render_config,
)
from aoc_star.core.errors import InvalidConfigError


def test_parse_config_reads_all_keys() -> None:
    """Test that token, year and offline are parsed."""
    config = parse_config('token = "abc"\nyear = 2022\noffline = true\n', Path("c.toml"))

    assert config == Config(token="abc", year=2022, offline=True)


def test_parse_config_missing_keys_default() -> None:
    """Test that an empty document yields an all-default config."""
    assert parse_config("", Path("c.toml")) == Config()


def test_parse_config_rejects_malformed_toml() -> None:
    """Test that a syntax error is reported with the file path."""
    with pytest.raises(InvalidConfigError) as exc_info:
        parse_config("token = ", Path("/x/aoc-star.toml"))

    assert exc_info.value.path == Path("/x/aoc-star.toml")


def test_parse_config_rejects_wrong_types() -> None:
    """Test that a non-integer year and a non-string token are rejected."""
    with pytest.raises(InvalidConfigError, match="'year' must be an integer"):
        parse_config('year = "2024"', Path("c.toml"))

    with pytest.raises(InvalidConfigError, match="'year' must be an integer"):
        parse_config("year = true", Path("c.toml"))

    with pytest.raises(InvalidConfigError, match="'token' must be a string"):
        parse_config("token = 12", Path("c.toml"))


def test_parse_config_rejects_string_offline() -> None:
    """Test that offline = "false" is an error rather than a truthy string."""
    with pytest.raises(InvalidConfigError, match="'offline' must be a boolean"):
        parse_config('offline = "false"', Path("c.toml"))


def test_render_config_omits_unset_keys() -> None:
    """Test that year and offline are only written when set."""
    text = render_config(Config(token="abc"))

    assert 'token = "abc"' in text
    assert "year" not in text
    assert "offline" not in text
    assert parse_config(text, Path("c.toml")) == Config(token="abc")


def test_real_store_returns_none_without_files(tmp_path: Path) -> None:
    """Test that missing files load as None."""
    store = RealConfigStore(tmp_path / "cwd", global_path=tmp_path / "global" / "config.toml")

    assert store.load_local() is None
    assert store.load_global() is None


def test_real_store_reads_local_file_from_cwd(tmp_path: Path) -> None:
    """Test that the local config is aoc-star.toml in the working directory."""
    (tmp_path / LOCAL_CONFIG_NAME).write_text('token = "local"\nyear = 2020\n', encoding="utf-8")
    store = RealConfigStore(tmp_path, global_path=tmp_path / "global.toml")

    assert store.local_path() == tmp_path / LOCAL_CONFIG_NAME
    assert store.load_local() == Config(token="local", year=2020)


def test_real_store_save_global_creates_directory(tmp_path: Path) -> None:
    """Test that saving the global config creates its parent directory."""
    global_path = tmp_path / "config" / "aoc-star" / "config.toml"
    store = RealConfigStore(tmp_path, global_path=global_path)

    written = store.save_global(Config(token="tok", year=2023))

    assert written == global_path
    assert global_path.exists()
    assert store.load_global() == Config(token="tok", year=2023)


def test_real_store_save_local_round_trips(tmp_path: Path) -> None:
    """Test that a saved local config loads back unchanged."""
    store = RealConfigStore(tmp_path, global_path=tmp_path / "g.toml")

    store.save_local(Config(token="tok", offline=True))

    assert store.load_local() == Config(token="tok", offline=True)


def test_default_global_path_honors_xdg_config_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that XDG_CONFIG_HOME relocates the global config."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_global_config_path() == tmp_path / "aoc-star" / "config.toml"


def test_default_global_path_falls_back_to_home(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the global config lives under ~/.config by default."""
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert default_global_config_path() == Path.home() / ".config" / "aoc-star" / "config.toml"


def test_fake_store_tracks_saves() -> None:
    """Test that FakeConfigStore records saves and serves them back."""
    store = FakeConfigStore()

    store.save_global(Config(token="g"))
    store.save_local(Config(year=2021))

    assert store.saved == [("global", Config(token="g")), ("local", Config(year=2021))]
    assert store.load_global() == Config(token="g")
    assert store.load_local() == Config(year=2021)
