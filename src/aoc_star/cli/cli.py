import logging
import os
from collections.abc import Sequence
from pathlib import Path

import click
from rich.console import Console

from aoc_star.cli.ensure import Ensure
from aoc_star.cli.output import error_output, machine_output, user_output
from aoc_star.cli.rendering import build_entries_table, format_outcome
from aoc_star.cli.setup import run_setup
from aoc_star.core.context import AocStarContext, create_context
from aoc_star.core.dispatcher import dispatch
from aoc_star.core.entry import Query
from aoc_star.core.errors import AocStarError, PublishError
from aoc_star.core.registry import Registry

logger = logging.getLogger(__name__)

# Enable debug logging if AOC_STAR_DEBUG environment variable is set
if os.getenv("AOC_STAR_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command("aoc-star", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="aoc-star")
@click.option("-d", "--day", type=int, help="Puzzle day to run (required unless --setup/--list).")
@click.option("-p", "--part", type=int, default=1, show_default=True, help="Puzzle part.")
@click.option("-y", "--year", type=int, help="Event year (default: configured year, else current).")
@click.option(
    "--input-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read puzzle input from this file instead of the cache/adventofcode.com.",
)
@click.option("--publish", is_flag=True, help="Submit the answer to adventofcode.com.")
@click.option("--setup", is_flag=True, help="Create or update the config file and exit.")
@click.option("--local", is_flag=True, help="With --setup, write ./aoc-star.toml instead.")
@click.option("--list", "list_entries", is_flag=True, help="List registered solutions and exit.")
@click.pass_context
def cli(
    click_ctx: click.Context,
    day: int | None,
    part: int,
    year: int | None,
    input_file: Path | None,
    publish: bool,
    setup: bool,
    local: bool,
    list_entries: bool,
) -> None:
    """Run a registered Advent of Code solution."""
    # Tests pass a ready context; run() passes its registry; the console script
    # passes nothing. Built here so --help and --version never touch config files.
    if isinstance(click_ctx.obj, AocStarContext):
        ctx = click_ctx.obj
    else:
        registry = click_ctx.obj if click_ctx.obj is not None else Registry()
        ctx = create_context(registry)
        click_ctx.call_on_close(ctx.remote.close)
        click_ctx.obj = ctx

    Ensure.invariant(not local or setup, "--local can only be used with --setup")

    if setup:
        try:
            run_setup(ctx, local=local)
        except (AocStarError, PermissionError) as e:
            error_output(str(e))
            raise SystemExit(1) from e
        return

    if list_entries:
        if len(ctx.registry) == 0:
            user_output("No solutions registered")
            return
        Console().print(build_entries_table(ctx.registry))
        return

    day = Ensure.not_none(day, "Missing option '-d' / '--day'")
    Ensure.positive(day, "--day")
    Ensure.positive(part, "--part")

    query = Query(day=day, part=part, year=year)
    logger.debug("Dispatching %s input_file=%s publish=%s", query, input_file, publish)

    try:
        result = dispatch(ctx, query, input_file=input_file, publish=publish)
    except PublishError as e:
        # The answer is still valid; print it before failing
        machine_output(e.answer)
        error_output(str(e))
        raise SystemExit(1) from e
    except AocStarError as e:
        error_output(str(e))
        raise SystemExit(1) from e

    machine_output(result.answer)
    if result.outcome is not None:
        user_output(format_outcome(result.outcome))


def run(registry: Registry, args: Sequence[str] | None = None) -> None:
    """Run the CLI against a user-built registry.

    Call this from the program that registers its solutions:

        if __name__ == "__main__":
            run(build_registry(day01.register, day02.register))

    Args:
        registry: Registry holding the solutions; frozen before dispatch
        args: Command line arguments (default: sys.argv[1:])
    """
    cli.main(args=args, prog_name="aoc-star", obj=registry)


def main() -> None:
    """CLI entry point used by the `aoc-star` console script."""
    cli()
