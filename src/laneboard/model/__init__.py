"""Board state engine: pure operations over immutable boards."""

from laneboard.model.card import add_card, delete_card, edit_card, find_card
from laneboard.model.lane import add_lane, delete_lane, edit_lane_title
from laneboard.model.move import DragResult, Location, locate_card, move_card, move_card_to
from laneboard.model.state import BoardState
from laneboard.model.validate import is_board

__all__ = [
    "BoardState",
    "DragResult",
    "Location",
    "add_card",
    "add_lane",
    "delete_card",
    "delete_lane",
    "edit_card",
    "edit_lane_title",
    "find_card",
    "is_board",
    "locate_card",
    "move_card",
    "move_card_to",
]
