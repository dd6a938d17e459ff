"""Interactive creation of the config file (--setup)."""

from pathlib import Path

import click

from aoc_star.cli.output import user_output
from aoc_star.core.config_store import Config
from aoc_star.core.context import AocStarContext
from aoc_star.core.errors import InvalidConfigError


def _current_settings(ctx: AocStarContext, *, local: bool) -> tuple[Config, str | None, int]:
    """Existing target config plus the token and year to offer as defaults.

    An invalid config file is reported and treated as absent so that setup
    can overwrite it.
    """
    store = ctx.config_store
    try:
        existing = (store.load_local() if local else store.load_global()) or Config()
    except InvalidConfigError as e:
        _warn_ignored(e)
        return Config(), None, ctx.time.now().year

    try:
        return existing, ctx.config.credential_token(), ctx.config.default_year()
    except InvalidConfigError as e:
        _warn_ignored(e)
        return existing, None, ctx.time.now().year


def _warn_ignored(error: InvalidConfigError) -> None:
    user_output(click.style(f"Ignoring existing settings. {error}", fg="yellow"))


def run_setup(ctx: AocStarContext, *, local: bool) -> Path:
    """Prompt for token and default year, then write the local or global config.

    Existing values are offered as defaults; the offline flag is preserved.

    Returns:
        Path of the written config file
    """
    store = ctx.config_store
    target = store.local_path() if local else store.global_path()
    user_output(f"Configuring {target}")

    existing, current_token, current_year = _current_settings(ctx, local=local)

    token_hint = " [keep current]" if current_token else ""
    token = click.prompt(
        f"Advent of Code session token{token_hint}",
        default=current_token or "",
        hide_input=True,
        show_default=False,
        err=True,
    ).strip()

    year = click.prompt(
        "Default year",
        default=current_year,
        type=click.IntRange(min=2015),
        err=True,
    )

    config = Config(token=token or None, year=year, offline=existing.offline)
    path = store.save_local(config) if local else store.save_global(config)

    user_output(click.style(f"✓ Saved config to {path}", fg="green"))
    if not token:
        user_output("No token saved; set AOC_TOKEN to fetch inputs and submit answers.")
    return path
