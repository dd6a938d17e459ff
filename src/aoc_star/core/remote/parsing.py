"""Parsing of adventofcode.com answer pages."""

import re

from bs4 import BeautifulSoup

from aoc_star.core.remote.types import SubmitOutcome, SubmitStatus

_WAIT_RE = re.compile(r"You have (?:(\d+)m )?(\d+)s left to wait")

_MARKERS: list[tuple[str, SubmitStatus]] = [
    ("That's the right answer", SubmitStatus.CORRECT),
    ("That's not the right answer", SubmitStatus.INCORRECT),
    ("Did you already complete it", SubmitStatus.ALREADY_COMPLETED),
    ("You gave an answer too recently", SubmitStatus.TOO_RECENT),
    ("You don't seem to be solving the right level", SubmitStatus.WRONG_LEVEL),
]


def extract_article_text(page: str) -> str:
    """Return the plain text of the first <article> element, or of the whole page."""
    soup = BeautifulSoup(page, "html.parser")
    node = soup.article if soup.article is not None else soup
    return " ".join(node.get_text().split())


def parse_wait_seconds(message: str) -> int | None:
    """Parse "You have 1m 30s left to wait" into 90."""
    match = _WAIT_RE.search(message)
    if match is None:
        return None
    minutes, seconds = match.groups()
    return int(seconds) + 60 * int(minutes or 0)


def parse_submit_response(page: str) -> SubmitOutcome:
    """Classify the HTML returned after posting an answer."""
    message = extract_article_text(page)
    for marker, status in _MARKERS:
        if marker in message:
            wait = parse_wait_seconds(message) if status is SubmitStatus.TOO_RECENT else None
            return SubmitOutcome(status=status, message=message, wait_seconds=wait)
    return SubmitOutcome(status=SubmitStatus.UNKNOWN, message=message)
