import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def _load(name: str) -> Any:
    with open(FIXTURES / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sets_payload() -> dict[str, Any]:
    """Scryfall set-list response: one digital set, three physical, one undated."""
    return _load("scryfall_sets.json")


@pytest.fixture
def bolt_payload() -> dict[str, Any]:
    """Single-faced instant with image_uris on the card object."""
    return _load("lightning_bolt.json")


@pytest.fixture
def double_faced_payload() -> dict[str, Any]:
    """Transform card: images only on card_faces."""
    return _load("delver_of_secrets.json")


@pytest.fixture
def planeswalker_payload() -> dict[str, Any]:
    return {
        "object": "card",
        "name": "Jace, the Mind Sculptor",
        "set": "wwk",
        "type_line": "Legendary Planeswalker — Jace",
        "mana_cost": "{2}{U}{U}",
        "loyalty": "3",
        "oracle_text": "+2: Look at the top card of target player's library.",
        "artist": "Jason Chan",
        "image_uris": {"normal": "https://cards.scryfall.io/normal/front/jace.jpg"},
    }


@pytest.fixture
def search_payload(bolt_payload: dict[str, Any]) -> dict[str, Any]:
    second = dict(bolt_payload, name="Lightning Bolt // Bolt", set="sld")
    return {
        "object": "list",
        "total_cards": 2,
        "has_more": False,
        "data": [bolt_payload, second],
    }


@pytest.fixture
def not_found_payload() -> dict[str, Any]:
    return {
        "object": "error",
        "code": "not_found",
        "status": 404,
        "details": "Your query didn't match any cards.",
    }
