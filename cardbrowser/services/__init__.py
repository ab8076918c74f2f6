"""
CardBrowser services.

Card-data client, display formatting, renderers and the view controller.
"""

from cardbrowser.services.card_display import build_card_display, build_stats
from cardbrowser.services.renderer import PanelRenderer, Renderer
from cardbrowser.services.scryfall_client import CardDataClient, ScryfallClient
from cardbrowser.services.view_controller import ViewController

__all__ = [
    "CardDataClient",
    "PanelRenderer",
    "Renderer",
    "ScryfallClient",
    "ViewController",
    "build_card_display",
    "build_stats",
]
