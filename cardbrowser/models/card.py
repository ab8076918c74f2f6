from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single card record as returned by the card-data API.

    Attributes:
        name: Card name
        set_code: Lowercase set code the printing belongs to (e.g., "dmu")
        type_line: Full type line (e.g., "Creature — Elf Druid")
        image_url: Normal-size image, taken from the first face for multi-faced cards
        power: Printed power, kept as text ("*", "1+*" are valid)
        toughness: Printed toughness, kept as text
        loyalty: Starting loyalty for planeswalkers
        mana_cost: Mana cost in brace notation (e.g., "{1}{R}")
        oracle_text: Current official rules text
        flavor_text: Flavor text of this printing
        artist: Illustrator credit
    """

    name: str
    set_code: str
    type_line: str | None = None
    image_url: str | None = None
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    mana_cost: str | None = None
    oracle_text: str | None = None
    flavor_text: str | None = None
    artist: str | None = None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A page of name-search results, in the order the API returned them."""

    total_count: int
    results: tuple[Card, ...] = ()

    @property
    def first(self) -> Card | None:
        return self.results[0] if self.results else None
