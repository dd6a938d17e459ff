"""Production Advent of Code client using httpx."""

import logging

import httpx

from aoc_star.core.config_provider import redact_token
from aoc_star.core.errors import RemoteRequestError
from aoc_star.core.remote.abc import AdventOfCode
from aoc_star.core.remote.parsing import parse_submit_response
from aoc_star.core.remote.types import SubmitOutcome

logger = logging.getLogger(__name__)

BASE_URL = "https://adventofcode.com"
USER_AGENT = "aoc-star (puzzle input fetcher)"
DEFAULT_TIMEOUT = 30.0


class RealAdventOfCode(AdventOfCode):
    """Talks to adventofcode.com with the user's session cookie."""

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Create the client.

        Args:
            client: Preconfigured httpx client, closed by close() (tests pass one
                with a MockTransport)
            base_url: Site root, without trailing slash
            timeout: Request timeout in seconds when no client is given
        """
        if client is None:
            client = httpx.Client(timeout=timeout, headers={"User-Agent": USER_AGENT})
        self._client = client
        self._base_url = base_url.rstrip("/")

    def is_enabled(self) -> bool:
        return True

    def close(self) -> None:
        self._client.close()

    def fetch_input(self, year: int, day: int, token: str) -> str:
        url = f"{self._base_url}/{year}/day/{day}/input"
        logger.info("Fetching input year=%d day=%d token=%s", year, day, redact_token(token))
        response = self._request("GET", url, token)

        if response.status_code == 404:
            raise RemoteRequestError(url, 404, f"puzzle {year}/{day:02d} is not available yet")
        _raise_for_status(url, response)
        return response.text

    def submit_answer(
        self, year: int, day: int, part: int, answer: str, token: str
    ) -> SubmitOutcome:
        url = f"{self._base_url}/{year}/day/{day}/answer"
        logger.info(
            "Posting %r to %s (part %d) token=%s", answer, url, part, redact_token(token)
        )
        response = self._request("POST", url, token, data={"level": str(part), "answer": answer})
        _raise_for_status(url, response)
        outcome = parse_submit_response(response.text)
        logger.debug("Submit outcome: %s", outcome.status.value)
        return outcome

    def _request(
        self, method: str, url: str, token: str, data: dict[str, str] | None = None
    ) -> httpx.Response:
        try:
            return self._client.request(
                method,
                url,
                headers={"Cookie": f"session={token}"},
                data=data,
                follow_redirects=False,
            )
        except httpx.HTTPError as e:
            raise RemoteRequestError(url, None, str(e) or type(e).__name__) from e


def _raise_for_status(url: str, response: httpx.Response) -> None:
    if response.is_redirect:
        # The site sends logged-out requests to the login page
        raise RemoteRequestError(
            url,
            response.status_code,
            "redirected to the login page; the session token is invalid or expired",
        )
    if not response.is_success:
        raise RemoteRequestError(url, response.status_code, _describe(response))


def _describe(response: httpx.Response) -> str:
    body = response.text.strip()
    if body:
        return body.splitlines()[0][:200]
    return response.reason_phrase or "no response body"
