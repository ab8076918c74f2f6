"""
Scryfall payload parsers.

Translates Scryfall JSON objects into the browser's domain records.

Card objects: https://scryfall.com/docs/api/cards
Set objects: https://scryfall.com/docs/api/sets
"""

from datetime import date
from typing import Any

from cardbrowser.models.card import Card, SearchResult
from cardbrowser.models.set_summary import SetSummary


def _parse_release_date(value: Any) -> date | None:
    """Parse an ISO "YYYY-MM-DD" release date, None if missing or malformed."""
    if not value:
        return None
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return None


def _required_text(obj: dict[str, Any], key: str) -> str:
    """
    Return a field that must be a non-empty string.

    Raises:
        KeyError: If the field is missing
        ValueError: If the field is null, empty or not a string
    """
    value = obj[key]
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key!r} must be a non-empty string, got {value!r}")
    return value


def _optional_text(card: dict[str, Any], key: str) -> str | None:
    """Return a field as text, treating missing and empty values alike."""
    value = card.get(key)
    if value is None or value == "":
        return None
    return str(value)


def extract_image_url(card: dict[str, Any]) -> str | None:
    """
    Pick the image to show for a card.

    Single-faced cards carry ``image_uris`` directly. Multi-faced cards
    (transform, modal double-faced) carry one per face instead, in which
    case the first face is used.

    Args:
        card: Scryfall card object

    Returns:
        URL of the "normal" image, or None if the card has no image
    """
    image_uris = card.get("image_uris")
    if image_uris:
        return image_uris.get("normal")

    faces = card.get("card_faces") or []
    if faces:
        face_uris = faces[0].get("image_uris")
        if face_uris:
            return face_uris.get("normal")

    return None


def parse_card(card: dict[str, Any]) -> Card:
    """
    Build a Card from a Scryfall card object.

    Args:
        card: Scryfall card object

    Returns:
        Parsed Card

    Raises:
        KeyError: If the object has no name or set code
        ValueError: If the name or set code is not a non-empty string
    """
    return Card(
        name=_required_text(card, "name"),
        set_code=_required_text(card, "set"),
        type_line=_optional_text(card, "type_line"),
        image_url=extract_image_url(card),
        power=_optional_text(card, "power"),
        toughness=_optional_text(card, "toughness"),
        loyalty=_optional_text(card, "loyalty"),
        mana_cost=_optional_text(card, "mana_cost"),
        oracle_text=_optional_text(card, "oracle_text"),
        flavor_text=_optional_text(card, "flavor_text"),
        artist=_optional_text(card, "artist"),
    )


def parse_set_summary(set_data: dict[str, Any]) -> SetSummary:
    """
    Build a SetSummary from a Scryfall set object.

    Raises:
        KeyError: If the object has no code or name
        ValueError: If the code or name is not a non-empty string
    """
    return SetSummary(
        code=_required_text(set_data, "code"),
        name=_required_text(set_data, "name"),
        release_date=_parse_release_date(set_data.get("released_at")),
        digital=bool(set_data.get("digital", False)),
    )


def parse_set_list(payload: dict[str, Any]) -> list[SetSummary]:
    """Parse the ``data`` array of a set-list response, in catalog order."""
    return [parse_set_summary(s) for s in payload["data"]]


def parse_search_result(payload: dict[str, Any]) -> SearchResult:
    """
    Parse a card-search list response.

    Args:
        payload: Scryfall list object with ``total_cards`` and ``data``

    Returns:
        SearchResult with cards in the order returned
    """
    results = tuple(parse_card(c) for c in payload.get("data", []))
    return SearchResult(
        total_count=int(payload.get("total_cards", len(results))),
        results=results,
    )
