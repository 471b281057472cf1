"""Shared helpers for CLI command handlers."""

import json
import sys

from laneboard.config import Config
from laneboard.model.card import find_card
from laneboard.model.move import locate_card
from laneboard.models import Board, Card, Lane, find_lane
from laneboard.persist import save_board
from laneboard.transfer import decode_board


def load_config(args) -> Config:
    """Config from file and environment, with --data-dir applied on top."""
    return Config.load().override(data_dir=getattr(args, "data_dir", None))


def load_board_or_die(config: Config, json_mode: bool) -> Board:
    """Load the stored board. Empty if nothing is stored, exit 1 if it's invalid."""
    storage = config.storage()
    text = storage.get(config.storage_key)
    if text is None:
        return ()
    board = decode_board(text)
    if board is None:
        error(f"Stored board {storage.path_for(config.storage_key)} is not valid.", json_mode)
    return board


def save(config: Config, board: Board) -> None:
    """Write the board to storage immediately."""
    save_board(config.storage(), board, config.storage_key)


def resolve_lane(board: Board, ref: str) -> Lane | None:
    """Find a lane by id, or by 1-indexed position."""
    lane = find_lane(board, ref)
    if lane is not None:
        return lane
    if ref.isdigit() and 1 <= int(ref) <= len(board):
        return board[int(ref) - 1]
    return None


def find_lane_or_die(board: Board, ref: str, json_mode: bool) -> Lane:
    """Lookup lane by id or position. Exit 1 listing available lanes if not found."""
    lane = resolve_lane(board, ref)
    if lane is not None:
        return lane
    available = [f"  {i}  {lane.id}  {lane.title}" for i, lane in enumerate(board, 1)]
    msg = f"Lane '{ref}' not found."
    if available:
        msg += " Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card_or_die(board: Board, card_id: str, json_mode: bool) -> tuple[Lane, Card]:
    """Lookup card by id. Exit 1 if not found."""
    location = locate_card(board, card_id)
    if location is None:
        error(f"Card '{card_id}' not found.", json_mode)
    return find_lane(board, location.lane_id), find_card(board, location.lane_id, card_id)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def lane_summary(lane: Lane, position: int) -> dict:
    """Summary dict for a lane."""
    return {"position": position, "id": lane.id, "title": lane.title, "cards": len(lane.cards)}


def format_lane_line(s: dict, indent: str = "") -> str:
    """Format a lane summary dict as a text line."""
    cards = "card" if s["cards"] == 1 else "cards"
    return f"{indent}{s['position']}  {s['id']}  {s['title']:<16} {s['cards']} {cards}"
