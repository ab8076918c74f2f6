"""Tests for card detail formatting."""

from typing import Any

from cardbrowser.models.card import Card
from cardbrowser.parsers.scryfall import parse_card
from cardbrowser.services.card_display import build_card_display, build_stats


class TestBuildStats:
    def test_no_power_toughness_no_row(self) -> None:
        card = Card(name="Lightning Bolt", set_code="leb", mana_cost="{R}")

        labels = [s.label for s in build_stats(card)]

        assert "Power/Toughness" not in labels

    def test_power_and_toughness_one_row(self) -> None:
        card = Card(name="Grizzly Bears", set_code="leb", power="2", toughness="2")

        stats = build_stats(card)

        assert len(stats) == 1
        assert stats[0].label == "Power/Toughness"
        assert stats[0].value == "2 / 2"

    def test_power_without_toughness_no_row(self) -> None:
        card = Card(name="Odd Card", set_code="unh", power="1")
        assert build_stats(card) == []

    def test_stat_order(self, planeswalker_payload: dict[str, Any]) -> None:
        card = parse_card(planeswalker_payload)

        stats = build_stats(card)

        assert [(s.label, s.value) for s in stats] == [
            ("Loyalty", "3"),
            ("Mana Cost", "{2}{U}{U}"),
        ]

    def test_bare_card_has_no_stats(self) -> None:
        assert build_stats(Card(name="Plains", set_code="leb")) == []


class TestBuildCardDisplay:
    def test_full_card(self, bolt_payload: dict[str, Any]) -> None:
        display = build_card_display(parse_card(bolt_payload), "Limited Edition Beta")

        assert display.name == "Lightning Bolt"
        assert display.type_line == "Instant"
        assert display.set_line == "Set: Limited Edition Beta"
        assert display.image_url == "https://cards.scryfall.io/normal/front/bolt.jpg"
        assert display.image_alt == "Lightning Bolt"
        assert display.oracle_text == "Lightning Bolt deals 3 damage to any target."
        assert display.artist_credit == "Illustrated by Christopher Rush"

    def test_defaults_for_missing_fields(self) -> None:
        display = build_card_display(Card(name="Mystery", set_code="xyz"), "XYZ")

        assert display.type_line == "Unknown Type"
        assert display.oracle_text == "No text"
        assert display.flavor_text == '"No flavor text available"'
        assert display.artist_credit == "Illustrated by Unknown Artist"
        assert display.image_url is None
        assert display.stats == []

    def test_flavor_text_is_quoted(self) -> None:
        card = Card(name="Llanowar Elves", set_code="leb", flavor_text="One bone broken.")

        display = build_card_display(card, "Beta")

        assert display.flavor_text == '"One bone broken."'

    def test_double_faced_uses_first_face_image(
        self, double_faced_payload: dict[str, Any]
    ) -> None:
        display = build_card_display(parse_card(double_faced_payload), "Innistrad")

        assert display.image_url == "https://cards.scryfall.io/normal/front/delver.jpg"
