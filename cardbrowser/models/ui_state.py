"""
Display states of the card browser.

Exactly one state is active at a time. The view controller moves between
them; renderers only ever see the state they are told to show.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from cardbrowser.models.card import Card


class UIStateKind(str, Enum):
    """Serializable tag for each display state."""

    IDLE = "idle"
    LOADING = "loading"
    CARD = "card"
    ERROR = "error"
    NO_RESULTS = "no_results"


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing shown: no card, no error, no spinner."""

    kind: ClassVar[UIStateKind] = UIStateKind.IDLE


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight."""

    kind: ClassVar[UIStateKind] = UIStateKind.LOADING


@dataclass(frozen=True, slots=True)
class ShowingCard:
    """A card is displayed, along with its resolved set name."""

    card: Card
    set_name: str

    kind: ClassVar[UIStateKind] = UIStateKind.CARD


@dataclass(frozen=True, slots=True)
class ShowingError:
    """A failure or validation message is displayed."""

    message: str

    kind: ClassVar[UIStateKind] = UIStateKind.ERROR


@dataclass(frozen=True, slots=True)
class ShowingNoResults:
    """A search matched nothing."""

    kind: ClassVar[UIStateKind] = UIStateKind.NO_RESULTS


UIState = Idle | Loading | ShowingCard | ShowingError | ShowingNoResults
