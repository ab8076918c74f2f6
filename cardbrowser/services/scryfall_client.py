"""
Scryfall API client.

Async client for the three read-only Scryfall endpoints the browser uses:
the set catalog, a random card, and a card search.

API docs: https://scryfall.com/docs/api
"""

import logging
from types import TracebackType
from typing import Any, Protocol

import httpx

from cardbrowser.config import settings
from cardbrowser.models.card import Card, SearchResult
from cardbrowser.models.failure import FetchError
from cardbrowser.models.set_summary import SetSummary
from cardbrowser.parsers.scryfall import parse_card, parse_search_result, parse_set_list

logger = logging.getLogger(__name__)

SETS_PATH = "/sets"
RANDOM_CARD_PATH = "/cards/random"
SEARCH_PATH = "/cards/search"

# Collapse reprints so each distinct card name appears once
SEARCH_UNIQUE_MODE = "cards"


class CardDataClient(Protocol):
    """Read-only card-data operations consumed by the view controller."""

    async def list_sets(self) -> list[SetSummary]: ...

    async def random_card(self, filter_query: str | None = None) -> Card: ...

    async def search_cards(self, query: str) -> SearchResult: ...


def _is_not_found_error(response: httpx.Response) -> bool:
    """Check for Scryfall's error object with code "not_found"."""
    if response.status_code != 404:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    return (
        isinstance(body, dict)
        and body.get("object") == "error"
        and body.get("code") == "not_found"
    )


class ScryfallClient:
    """
    Scryfall implementation of CardDataClient.

    Every failure surfaces as FetchError. Nothing is retried or cached.

    Usage:
        async with ScryfallClient() as client:
            sets = await client.list_sets()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root. Defaults to settings.scryfall_api_base
            timeout: Request timeout in seconds. Defaults to settings.request_timeout
            user_agent: User-Agent header. Defaults to settings.user_agent
            client: Pre-built httpx client to use instead of creating one.
                The caller stays responsible for closing it.
        """
        self.base_url = (base_url or settings.scryfall_api_base).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
            headers={
                "User-Agent": user_agent or settings.user_agent,
                "Accept": "application/json",
            },
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ScryfallClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        """
        Send a GET request.

        Raises:
            FetchError: On connection errors and timeouts (no status code)
        """
        try:
            return await self._client.get(path, params=params)
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise FetchError(str(e) or type(e).__name__) from e

    def _json(self, response: httpx.Response, http_failure_reason: str) -> dict[str, Any]:
        """
        Decode a JSON response body.

        Raises:
            FetchError: With ``http_failure_reason`` and the status code for
                non-2xx responses, or without a status for malformed bodies
        """
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s returned HTTP %d", response.request.url.path, response.status_code
            )
            raise FetchError(http_failure_reason, status_code=response.status_code) from e

        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Malformed response from {response.request.url.path}") from e

        if not isinstance(data, dict):
            raise FetchError(f"Malformed response from {response.request.url.path}")
        return data

    async def list_sets(self) -> list[SetSummary]:
        """
        Fetch the full set catalog.

        Returns:
            Every set, digital or not, in catalog order

        Raises:
            FetchError: If the request fails or the payload is malformed
        """
        response = await self._get(SETS_PATH)
        payload = self._json(response, "Failed to load sets")
        try:
            return parse_set_list(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchError(f"Malformed set list: {e}") from e

    async def random_card(self, filter_query: str | None = None) -> Card:
        """
        Fetch one random card.

        Args:
            filter_query: Optional Scryfall search query restricting the draw
                (e.g., "set:dmu")

        Returns:
            The drawn card

        Raises:
            FetchError: If the request fails, including when the filter
                matches no cards (Scryfall answers 404)
        """
        params = {"q": filter_query} if filter_query else None
        response = await self._get(RANDOM_CARD_PATH, params=params)
        payload = self._json(response, "Failed to fetch random card")
        try:
            return parse_card(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchError(f"Malformed card: {e}") from e

    async def search_cards(self, query: str) -> SearchResult:
        """
        Search cards by name, one entry per distinct card.

        Scryfall reports "no matches" as a 404 error object; that case is
        returned as an empty result rather than raised.

        Args:
            query: Search query (a plain card name works as a fuzzy name search)

        Returns:
            SearchResult in Scryfall's order

        Raises:
            FetchError: If the request fails or the payload is malformed
        """
        response = await self._get(
            SEARCH_PATH, params={"q": query, "unique": SEARCH_UNIQUE_MODE}
        )
        if _is_not_found_error(response):
            logger.info("Search for %r matched no cards", query)
            return SearchResult(total_count=0)

        payload = self._json(response, "Failed to search for cards")
        try:
            return parse_search_result(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise FetchError(f"Malformed search result: {e}") from e
