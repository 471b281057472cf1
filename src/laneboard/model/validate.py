"""Structural validation of untrusted board data."""

from typing import Any

LANE_FIELDS = ("id", "title")
CARD_FIELDS = ("id", "title", "info")


def _has_str_fields(obj: Any, fields: tuple[str, ...]) -> bool:
    return isinstance(obj, dict) and all(isinstance(obj.get(name), str) for name in fields)


def is_card(data: Any) -> bool:
    """True if data is a dict with string id, title and info."""
    return _has_str_fields(data, CARD_FIELDS)


def is_lane(data: Any) -> bool:
    """True if data is a dict with string id and title and a list of valid cards."""
    if not _has_str_fields(data, LANE_FIELDS):
        return False
    cards = data.get("cards")
    return isinstance(cards, list) and all(is_card(card) for card in cards)


def is_board(data: Any) -> bool:
    """True if data has the shape of a board: a list of valid lanes.

    Only the structure is checked. Ids are not checked for uniqueness.
    Never raises.
    """
    return isinstance(data, list) and all(is_lane(lane) for lane in data)
