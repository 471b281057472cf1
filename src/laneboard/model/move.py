"""Drag-and-drop move engine.

A drag ends with a DragResult: where the card was picked up and where it
was dropped. ``source.index`` is the card's position before removal and
``destination.index`` is its position after removal, so the card lands
before whatever sits at that index in the shortened target list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from laneboard.models import Board, find_lane, replace_lanes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """A position in a lane."""

    lane_id: str
    index: int


@dataclass(frozen=True)
class DragResult:
    """Source and destination of a finished drag. No destination means cancelled."""

    source: Location
    destination: Location | None = None


def move_card(board: Board, result: DragResult) -> Board:
    """Apply a finished drag to the board and return the new board.

    Cancelled drops, drops back onto the same spot and drags that refer to
    lanes or cards that no longer exist all return board unchanged.
    """
    source, destination = result.source, result.destination
    if destination is None or destination == source:
        return board

    source_lane = find_lane(board, source.lane_id)
    destination_lane = find_lane(board, destination.lane_id)
    if source_lane is None or destination_lane is None:
        logger.debug("drop abandoned, unknown lane in %s", result)
        return board
    if not 0 <= source.index < len(source_lane.cards) or destination.index < 0:
        logger.debug("drop abandoned, index out of range in %s", result)
        return board

    source_cards = list(source_lane.cards)
    card = source_cards.pop(source.index)

    if source.lane_id == destination.lane_id:
        source_cards.insert(destination.index, card)
        return replace_lanes(board, replace(source_lane, cards=tuple(source_cards)))

    destination_cards = list(destination_lane.cards)
    destination_cards.insert(destination.index, card)
    return replace_lanes(
        board,
        replace(source_lane, cards=tuple(source_cards)),
        replace(destination_lane, cards=tuple(destination_cards)),
    )


def locate_card(board: Board, card_id: str) -> Location | None:
    """Find the lane and index holding a card."""
    for lane in board:
        for index, card in enumerate(lane.cards):
            if card.id == card_id:
                return Location(lane.id, index)
    return None


def move_card_to(board: Board, card_id: str, lane_id: str, index: int | None = None) -> Board:
    """Move a card, identified by id, to index in lane_id. None appends."""
    source = locate_card(board, card_id)
    target = find_lane(board, lane_id)
    if source is None or target is None:
        return board
    if index is None:
        index = len(target.cards) - (1 if lane_id == source.lane_id else 0)
    return move_card(board, DragResult(source, Location(lane_id, index)))
