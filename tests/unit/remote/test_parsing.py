"""Tests for classifying adventofcode.com answer pages."""

from aoc_star.core.remote.parsing import (
    extract_article_text,
    parse_submit_response,
    parse_wait_seconds,
)
from aoc_star.core.remote.types import SubmitStatus


def _page(article: str) -> str:
    return f"<html><body><main><article><p>{article}</p></article></main></body></html>"


def test_extract_article_text_strips_markup_and_entities() -> None:
    """Test that tags are removed, entities decoded and whitespace collapsed."""
    page = _page("That&apos;s the   <em>right</em>\n answer!  <a href='/2024'>[Return]</a>")

    assert extract_article_text(page) == "That's the right answer! [Return]"


def test_extract_article_text_ignores_text_outside_article() -> None:
    """Test that navigation and footer text around the article are dropped."""
    page = (
        "<html><header>Advent of Code [Log Out]</header>"
        "<main><article><p>That's not the right answer.</p></article>"
        "<p>Share on Mastodon</p></main></html>"
    )

    assert extract_article_text(page) == "That's not the right answer."


def test_extract_article_text_without_article_uses_whole_page() -> None:
    """Test the fallback when the page has no article element."""
    assert extract_article_text("<p>Internal   error</p>") == "Internal error"


def test_correct_answer() -> None:
    outcome = parse_submit_response(_page("That's the right answer! You are one gold star closer."))

    assert outcome.status is SubmitStatus.CORRECT
    assert outcome.accepted
    assert outcome.wait_seconds is None


def test_incorrect_answer() -> None:
    outcome = parse_submit_response(
        _page("That's not the right answer; your answer is too low. Please wait one minute.")
    )

    assert outcome.status is SubmitStatus.INCORRECT
    assert not outcome.accepted
    assert "too low" in outcome.message


def test_already_completed() -> None:
    outcome = parse_submit_response(
        _page("You don't seem to be solving the right level.  Did you already complete it?")
    )

    assert outcome.status is SubmitStatus.ALREADY_COMPLETED


def test_wrong_level_without_completion_hint() -> None:
    outcome = parse_submit_response(_page("You don't seem to be solving the right level."))

    assert outcome.status is SubmitStatus.WRONG_LEVEL


def test_too_recent_parses_wait_time() -> None:
    """Test that the rate-limit page reports how long to wait."""
    outcome = parse_submit_response(
        _page("You gave an answer too recently; you have to wait after submitting an answer "
              "before trying again.  You have 1m 5s left to wait.")
    )

    assert outcome.status is SubmitStatus.TOO_RECENT
    assert outcome.wait_seconds == 65


def test_unrecognized_page_is_unknown() -> None:
    outcome = parse_submit_response(_page("Something new happened."))

    assert outcome.status is SubmitStatus.UNKNOWN
    assert outcome.message == "Something new happened."


def test_parse_wait_seconds() -> None:
    assert parse_wait_seconds("You have 42s left to wait.") == 42
    assert parse_wait_seconds("You have 2m 0s left to wait.") == 120
    assert parse_wait_seconds("No waiting here.") is None
