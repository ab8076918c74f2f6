"""Tests for the Scryfall API client."""

from typing import Any

import httpx
import pytest
import respx

from cardbrowser.models.failure import FetchError
from cardbrowser.services.scryfall_client import ScryfallClient

API = "https://api.scryfall.com"


class TestListSets:
    @pytest.mark.asyncio
    @respx.mock
    async def test_returns_full_catalog(self, sets_payload: dict[str, Any]) -> None:
        """Client returns every set; filtering is the controller's job."""
        respx.get(f"{API}/sets").mock(return_value=httpx.Response(200, json=sets_payload))

        async with ScryfallClient() as client:
            sets = await client.list_sets()

        assert len(sets) == 5
        assert sets[0].code == "ymkm"

    @pytest.mark.asyncio
    @respx.mock
    async def test_sends_user_agent(self, sets_payload: dict[str, Any]) -> None:
        route = respx.get(f"{API}/sets").mock(return_value=httpx.Response(200, json=sets_payload))

        async with ScryfallClient(user_agent="CardBrowserTests/0.1") as client:
            await client.list_sets()

        request = route.calls.last.request
        assert request.headers["User-Agent"] == "CardBrowserTests/0.1"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_http_error(self) -> None:
        respx.get(f"{API}/sets").mock(return_value=httpx.Response(500))

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Failed to load sets") as exc_info:
                await client.list_sets()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_payload(self) -> None:
        respx.get(f"{API}/sets").mock(return_value=httpx.Response(200, json={"object": "list"}))

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Malformed set list") as exc_info:
                await client.list_sets()

        assert exc_info.value.status_code is None


class TestRandomCard:
    @pytest.mark.asyncio
    @respx.mock
    async def test_unfiltered(self, bolt_payload: dict[str, Any]) -> None:
        route = respx.get(f"{API}/cards/random").mock(
            return_value=httpx.Response(200, json=bolt_payload)
        )

        async with ScryfallClient() as client:
            card = await client.random_card()

        assert card.name == "Lightning Bolt"
        assert "q" not in route.calls.last.request.url.params

    @pytest.mark.asyncio
    @respx.mock
    async def test_filtered_by_set(self, bolt_payload: dict[str, Any]) -> None:
        route = respx.get(f"{API}/cards/random").mock(
            return_value=httpx.Response(200, json=bolt_payload)
        )

        async with ScryfallClient() as client:
            await client.random_card("set:leb")

        assert route.calls.last.request.url.params["q"] == "set:leb"

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_set_is_http_error(self, not_found_payload: dict[str, Any]) -> None:
        """A filter with no matching cards comes back as 404."""
        respx.get(f"{API}/cards/random").mock(
            return_value=httpx.Response(404, json=not_found_payload)
        )

        async with ScryfallClient() as client:
            with pytest.raises(FetchError) as exc_info:
                await client.random_card("set:empty")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error(self) -> None:
        respx.get(f"{API}/cards/random").mock(side_effect=httpx.ConnectError("Connection refused"))

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Connection refused") as exc_info:
                await client.random_card()

        assert exc_info.value.is_http_error is False

    @pytest.mark.asyncio
    @respx.mock
    @pytest.mark.parametrize("field", ["name", "set"])
    async def test_null_required_field_is_malformed(
        self, bolt_payload: dict[str, Any], field: str
    ) -> None:
        """A card with a null name or set code never reaches the caller."""
        respx.get(f"{API}/cards/random").mock(
            return_value=httpx.Response(200, json=dict(bolt_payload, **{field: None}))
        )

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Malformed card") as exc_info:
                await client.random_card()

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body(self) -> None:
        respx.get(f"{API}/cards/random").mock(return_value=httpx.Response(200, text="<html>"))

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Malformed response"):
                await client.random_card()


class TestSearchCards:
    @pytest.mark.asyncio
    @respx.mock
    async def test_collapses_printings(self, search_payload: dict[str, Any]) -> None:
        route = respx.get(f"{API}/cards/search").mock(
            return_value=httpx.Response(200, json=search_payload)
        )

        async with ScryfallClient() as client:
            result = await client.search_cards("Lightning Bolt")

        params = route.calls.last.request.url.params
        assert params["q"] == "Lightning Bolt"
        assert params["unique"] == "cards"
        assert result.total_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_not_found_is_empty_result(self, not_found_payload: dict[str, Any]) -> None:
        """Scryfall answers 'no matches' with a 404 error object."""
        respx.get(f"{API}/cards/search").mock(
            return_value=httpx.Response(404, json=not_found_payload)
        )

        async with ScryfallClient() as client:
            result = await client.search_cards("Xyzzy")

        assert result.total_count == 0
        assert result.results == ()

    @pytest.mark.asyncio
    @respx.mock
    async def test_bad_request_is_error(self) -> None:
        respx.get(f"{API}/cards/search").mock(
            return_value=httpx.Response(
                400, json={"object": "error", "code": "bad_request", "status": 400}
            )
        )

        async with ScryfallClient() as client:
            with pytest.raises(FetchError, match="Failed to search for cards") as exc_info:
                await client.search_cards("(((")

        assert exc_info.value.status_code == 400


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_does_not_close_borrowed_client(self) -> None:
        http_client = httpx.AsyncClient(base_url=API)

        client = ScryfallClient(client=http_client)
        await client.aclose()

        assert http_client.is_closed is False
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_closes_own_client(self) -> None:
        client = ScryfallClient(base_url="https://example.test/")
        await client.aclose()

        assert client.base_url == "https://example.test"
        assert client._client.is_closed is True
