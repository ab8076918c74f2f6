"""
View controller for the card browser.

Wires user actions to card-data requests, and request outcomes to display
state. Every action follows the same sequence:

    Loading -> request -> ShowingCard | ShowingError | ShowingNoResults

except the two input checks (blank search term, cleared set selection),
which settle immediately without a request.

Overlapping requests: triggers stay enabled while Loading, so a second
action can start before the first resolves. Each request carries a
sequence number; with ``discard_stale_responses`` on, an outcome that is
not from the latest request is dropped. With it off, whichever response
arrives last is shown.
"""

import logging
from collections.abc import Awaitable, Callable

from cardbrowser.config import settings
from cardbrowser.models.card import Card
from cardbrowser.models.failure import (
    STANDARD_MESSAGES,
    FailureKind,
    FetchError,
)
from cardbrowser.models.set_summary import (
    SetSummary,
    physical_sets_newest_first,
    resolve_set_name,
)
from cardbrowser.models.ui_state import (
    Idle,
    Loading,
    ShowingCard,
    ShowingError,
    ShowingNoResults,
    UIState,
)
from cardbrowser.services.renderer import Renderer
from cardbrowser.services.scryfall_client import CardDataClient

logger = logging.getLogger(__name__)

LOAD_SETS_FAILED = "Failed to load Magic sets"
RANDOM_CARD_FAILED = "Failed to fetch random card"
SET_CARD_FAILED = "Failed to load card from set"
SEARCH_FAILED = "Failed to search for card"


class ViewController:
    """
    Owns the browser's transient state: the set catalog, the displayed card
    and the current UI state.

    Usage:
        controller = ViewController(client, renderer)
        await controller.initialize()
        await controller.search_by_name("Lightning Bolt")
    """

    def __init__(
        self,
        client: CardDataClient,
        renderer: Renderer,
        discard_stale_responses: bool | None = None,
    ) -> None:
        self._client = client
        self._renderer = renderer
        self._discard_stale = (
            settings.discard_stale_responses
            if discard_stale_responses is None
            else discard_stale_responses
        )
        self._sets: tuple[SetSummary, ...] = ()
        self._state: UIState = Idle()
        self._latest_request = 0

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def sets(self) -> tuple[SetSummary, ...]:
        """Physical sets, newest first. Empty until the catalog loads."""
        return self._sets

    @property
    def current_card(self) -> Card | None:
        if isinstance(self._state, ShowingCard):
            return self._state.card
        return None

    # =========================================================================
    # STATE
    # =========================================================================

    def _set_ui_state(self, state: UIState) -> None:
        """
        Show a state, then record it. The only writer of display state.

        A renderer that rejects the state leaves the previous one recorded.
        """
        if isinstance(state, Idle):
            self._renderer.show_idle()
        elif isinstance(state, Loading):
            self._renderer.show_loading()
        elif isinstance(state, ShowingCard):
            self._renderer.show_card(state.card, state.set_name)
        elif isinstance(state, ShowingError):
            self._renderer.show_error(state.message)
        elif isinstance(state, ShowingNoResults):
            self._renderer.show_no_results()

        self._state = state

    def _next_request(self) -> int:
        self._latest_request += 1
        return self._latest_request

    def _settle(self, request_id: int, state: UIState) -> None:
        """Show the outcome of a request unless a newer one superseded it."""
        if self._discard_stale and request_id != self._latest_request:
            logger.debug(
                "Dropping %s from request %d (latest is %d)",
                state.kind.value,
                request_id,
                self._latest_request,
            )
            return
        self._set_ui_state(state)

    def _showing(self, card: Card) -> ShowingCard:
        return ShowingCard(card=card, set_name=resolve_set_name(card.set_code, self._sets))

    async def _dispatch(
        self,
        fetch: Callable[[], Awaitable[UIState]],
        failure_prefix: str,
        http_failure_kind: FailureKind | None = None,
    ) -> None:
        """
        Run one request through Loading to its outcome.

        Args:
            fetch: Performs the request and maps the response to a state
            failure_prefix: Start of the error message on failure
            http_failure_kind: How to classify an error status from the
                server. Other failures are transport failures and keep the
                client's reason
        """
        request_id = self._next_request()
        self._set_ui_state(Loading())

        try:
            outcome = await fetch()
        except FetchError as e:
            kind = FailureKind.TRANSPORT_FAILURE
            if http_failure_kind is not None and e.is_http_error:
                kind = http_failure_kind
            reason = STANDARD_MESSAGES.get(kind, e.message)
            logger.warning("%s (%s): %s", failure_prefix, kind.value, reason)
            outcome = ShowingError(f"{failure_prefix}: {reason}")

        self._settle(request_id, outcome)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    async def initialize(self) -> None:
        """
        Load the set catalog and populate the set selector.

        Digital-only sets are dropped and the rest sorted newest first. On
        failure an error is shown and the selector stays empty. The catalog
        is loaded at most once.
        """
        if self._sets:
            logger.warning("Set catalog already loaded, ignoring initialize()")
            return

        request_id = self._next_request()
        self._set_ui_state(Loading())

        try:
            catalog = await self._client.list_sets()
        except FetchError as e:
            logger.error("%s: %s", LOAD_SETS_FAILED, e.message)
            self._settle(request_id, ShowingError(f"{LOAD_SETS_FAILED}: {e.message}"))
            return

        self._sets = tuple(physical_sets_newest_first(catalog))
        logger.info("Loaded %d physical sets of %d", len(self._sets), len(catalog))
        self._renderer.populate_set_options(self._sets)
        self._settle(request_id, Idle())

    async def fetch_random_card(self) -> None:
        """Show one random card from the whole card pool."""

        async def fetch() -> UIState:
            return self._showing(await self._client.random_card())

        await self._dispatch(fetch, RANDOM_CARD_FAILED)

    async def select_set(self, set_code: str | None) -> None:
        """
        Show one random card from the chosen set.

        An empty or None selection hides the card without a request; any
        other value is sent as the set code. A set with no
        cards comes back from the API as an error status and is reported as
        such.
        """
        if not set_code:
            self._next_request()
            self._set_ui_state(Idle())
            return

        async def fetch() -> UIState:
            return self._showing(await self._client.random_card(f"set:{set_code}"))

        await self._dispatch(
            fetch,
            SET_CARD_FAILED,
            http_failure_kind=FailureKind.SCOPED_EMPTY_SET,
        )

    async def search_by_name(self, term: str | None) -> None:
        """
        Search by card name and show the first match.

        Results keep the API's order. Zero matches shows the no-results
        panel, which is not an error.
        """
        query = (term or "").strip()
        if not query:
            self._next_request()
            self._set_ui_state(ShowingError(STANDARD_MESSAGES[FailureKind.EMPTY_INPUT]))
            return

        async def fetch() -> UIState:
            result = await self._client.search_cards(query)
            first = result.first
            if result.total_count == 0 or first is None:
                logger.info("No cards found for %r", query)
                return ShowingNoResults()
            return self._showing(first)

        await self._dispatch(fetch, SEARCH_FAILED)
