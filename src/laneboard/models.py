"""Data models for laneboard boards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Card:
    """A titled item with free-text info."""

    id: str
    title: str = ""
    info: str = ""


@dataclass(frozen=True)
class Lane:
    """A named, ordered column of cards."""

    id: str
    title: str = ""
    cards: tuple[Card, ...] = ()


Board = tuple[Lane, ...]


def find_lane(board: Board, lane_id: str) -> Lane | None:
    """Find a lane by id, or None."""
    for lane in board:
        if lane.id == lane_id:
            return lane
    return None


def board_ids(board: Board) -> set[str]:
    """Every lane and card id on the board."""
    ids = set()
    for lane in board:
        ids.add(lane.id)
        ids.update(card.id for card in lane.cards)
    return ids


def replace_lanes(board: Board, *lanes: Lane) -> Board:
    """Return board with the given lanes swapped in by id, all others untouched."""
    by_id = {lane.id: lane for lane in lanes}
    return tuple(by_id.get(lane.id, lane) for lane in board)


def board_to_data(board: Board) -> list[dict[str, Any]]:
    """Convert a board to plain JSON-ready lists and dicts."""
    return [
        {
            "id": lane.id,
            "title": lane.title,
            "cards": [{"id": card.id, "title": card.title, "info": card.info} for card in lane.cards],
        }
        for lane in board
    ]


def board_from_data(data: list[dict[str, Any]]) -> Board:
    """Build a board from validated data. Extra keys are ignored."""
    return tuple(
        Lane(
            id=lane["id"],
            title=lane["title"],
            cards=tuple(Card(id=card["id"], title=card["title"], info=card["info"]) for card in lane["cards"]),
        )
        for lane in data
    )
