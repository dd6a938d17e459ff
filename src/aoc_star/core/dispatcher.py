"""End-to-end run of one query: resolve, read input, solve, optionally publish."""

import logging
from dataclasses import dataclass
from pathlib import Path

from aoc_star.core.context import AocStarContext
from aoc_star.core.entry import Query, ResolvedMatch
from aoc_star.core.errors import (
    MissingCredentialError,
    PublishError,
    RemoteDisabledError,
    RemoteRequestError,
)
from aoc_star.core.remote.types import SubmitOutcome
from aoc_star.core.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Answer computed for a query, plus the submit outcome when published."""

    match: ResolvedMatch
    answer: str
    outcome: SubmitOutcome | None = None


def dispatch(
    ctx: AocStarContext,
    query: Query,
    *,
    input_file: Path | None = None,
    publish: bool = False,
) -> RunResult:
    """Resolve query, run its solver on the input and optionally submit the answer.

    The solver is called exactly once; its exceptions propagate unchanged.

    Raises:
        SolutionNotFoundError: If no entry matches
        InputIOError, MissingCredentialError, RemoteDisabledError, RemoteRequestError:
            If the input cannot be obtained
        PublishError: If publishing was requested and submission failed. The
            error carries the computed answer.
    """
    match = resolve(ctx.registry, query, ctx.config)
    puzzle_input = ctx.input_provider.get_input(match, input_file)

    logger.debug("Running %s on %d characters of input", match.entry.name, len(puzzle_input))
    answer = str(match.entry.solve(puzzle_input))

    if not publish:
        return RunResult(match=match, answer=answer)

    outcome = publish_answer(ctx, match, answer)
    return RunResult(match=match, answer=answer, outcome=outcome)


def publish_answer(ctx: AocStarContext, match: ResolvedMatch, answer: str) -> SubmitOutcome:
    """Submit answer for the matched (effective year, day, part).

    Raises:
        PublishError: Wrapping RemoteDisabledError, MissingCredentialError or
            RemoteRequestError; the answer is kept on the error.
    """
    try:
        if not ctx.remote.is_enabled():
            raise RemoteDisabledError("submit answer")
        token = ctx.config.credential_token()
        if token is None:
            raise MissingCredentialError("submit answer")
        return ctx.remote.submit_answer(match.year, match.day, match.part, answer, token)
    except (RemoteDisabledError, MissingCredentialError, RemoteRequestError) as e:
        raise PublishError(match.year, match.day, match.part, answer, e) from e
