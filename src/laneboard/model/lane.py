"""Lane mutation operations for laneboard boards."""

from dataclasses import replace

from laneboard.ids import make_id
from laneboard.models import Board, Lane, board_ids, find_lane, replace_lanes

NEW_LANE_TITLE = "New Lane"


def add_lane(board: Board) -> Board:
    """Append an empty lane with a fresh id."""
    lane = Lane(id=make_id("lane", board_ids(board)), title=NEW_LANE_TITLE)
    return (*board, lane)


def delete_lane(board: Board, lane_id: str) -> Board:
    """Remove the lane with lane_id and all its cards."""
    if find_lane(board, lane_id) is None:
        return board
    return tuple(lane for lane in board if lane.id != lane_id)


def edit_lane_title(board: Board, lane_id: str, title: str) -> Board:
    """Replace the title of the lane with lane_id."""
    lane = find_lane(board, lane_id)
    if lane is None or lane.title == title:
        return board
    return replace_lanes(board, replace(lane, title=title))
