from cardbrowser.parsers.scryfall import (
    extract_image_url,
    parse_card,
    parse_search_result,
    parse_set_list,
    parse_set_summary,
)

__all__ = [
    "extract_image_url",
    "parse_card",
    "parse_search_result",
    "parse_set_list",
    "parse_set_summary",
]
