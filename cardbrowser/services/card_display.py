"""
Card detail formatting.

Maps a Card onto the fields of the card detail panel. Each field is
defaulted on its own when the card lacks it; optional stats are left out
entirely rather than shown empty.
"""

from cardbrowser.models.card import Card
from cardbrowser.models.display import CardDisplay, StatRow

UNKNOWN_TYPE = "Unknown Type"
NO_ORACLE_TEXT = "No text"
NO_FLAVOR_TEXT = "No flavor text available"
UNKNOWN_ARTIST = "Unknown Artist"


def build_stats(card: Card) -> list[StatRow]:
    """
    Stat rows for a card, in display order.

    Power/Toughness needs both halves. "0" is a real value and is shown.
    """
    stats: list[StatRow] = []

    if card.power is not None and card.toughness is not None:
        stats.append(StatRow(label="Power/Toughness", value=f"{card.power} / {card.toughness}"))

    if card.loyalty is not None:
        stats.append(StatRow(label="Loyalty", value=card.loyalty))

    if card.mana_cost is not None:
        stats.append(StatRow(label="Mana Cost", value=card.mana_cost))

    return stats


def build_card_display(card: Card, set_name: str) -> CardDisplay:
    """
    Format a card for the detail panel.

    Args:
        card: Card to show
        set_name: Display name of the card's set, already resolved

    Returns:
        CardDisplay with every field populated
    """
    flavor = card.flavor_text or NO_FLAVOR_TEXT
    artist = card.artist or UNKNOWN_ARTIST

    return CardDisplay(
        name=card.name,
        type_line=card.type_line or UNKNOWN_TYPE,
        set_line=f"Set: {set_name}",
        image_url=card.image_url,
        image_alt=card.name,
        stats=build_stats(card),
        oracle_text=card.oracle_text or NO_ORACLE_TEXT,
        flavor_text=f'"{flavor}"',
        artist_credit=f"Illustrated by {artist}",
    )
