"""
Renderers for the card browser.

A renderer is a side-effecting sink: the view controller tells it what to
show and never reads anything back. Each ``show_*`` call replaces whatever
panel was visible before.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from cardbrowser.models.card import Card
from cardbrowser.models.display import PanelView, SetOption
from cardbrowser.models.failure import STANDARD_MESSAGES, FailureKind
from cardbrowser.models.set_summary import SetSummary
from cardbrowser.models.ui_state import UIStateKind
from cardbrowser.services.card_display import build_card_display

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Display sink driven by the view controller."""

    def show_idle(self) -> None: ...

    def show_loading(self) -> None: ...

    def show_card(self, card: Card, set_name: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_no_results(self) -> None: ...

    def populate_set_options(self, sets: Sequence[SetSummary]) -> None: ...


class PanelRenderer:
    """
    Renderer that keeps the visible panel as a serializable snapshot.

    The browser polls or receives ``view`` and draws it. All panel changes
    go through ``_set_view`` so only one panel is ever visible.
    """

    def __init__(self) -> None:
        self._view = PanelView()
        self._set_options: list[SetOption] = []

    @property
    def view(self) -> PanelView:
        return self._view

    @property
    def set_options(self) -> list[SetOption]:
        return list(self._set_options)

    def _set_view(self, view: PanelView) -> None:
        logger.debug("Panel state -> %s", view.state.value)
        self._view = view

    def show_idle(self) -> None:
        self._set_view(PanelView(state=UIStateKind.IDLE))

    def show_loading(self) -> None:
        self._set_view(PanelView(state=UIStateKind.LOADING))

    def show_card(self, card: Card, set_name: str) -> None:
        self._set_view(
            PanelView(state=UIStateKind.CARD, card=build_card_display(card, set_name))
        )

    def show_error(self, message: str) -> None:
        self._set_view(PanelView(state=UIStateKind.ERROR, error=message))

    def show_no_results(self) -> None:
        self._set_view(
            PanelView(
                state=UIStateKind.NO_RESULTS,
                no_results_message=STANDARD_MESSAGES[FailureKind.EMPTY_RESULT],
            )
        )

    def populate_set_options(self, sets: Sequence[SetSummary]) -> None:
        """Replace the selector options with one per set, in the order given."""
        self._set_options = [SetOption(value=s.code, label=s.option_label) for s in sets]
