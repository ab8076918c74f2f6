from cardbrowser.models.card import Card, SearchResult
from cardbrowser.models.display import CardDisplay, PanelView, SetOption, StatRow
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
    UIStateKind,
)

__all__ = [
    "Card",
    "CardDisplay",
    "FailureKind",
    "FetchError",
    "Idle",
    "Loading",
    "PanelView",
    "STANDARD_MESSAGES",
    "SearchResult",
    "SetOption",
    "SetSummary",
    "ShowingCard",
    "ShowingError",
    "ShowingNoResults",
    "StatRow",
    "UIState",
    "UIStateKind",
    "physical_sets_newest_first",
    "resolve_set_name",
]
