"""Board import and export as JSON files."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from laneboard.model.state import BoardState
from laneboard.model.validate import is_board
from laneboard.models import Board, board_from_data, board_to_data

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "data.json"


def encode_board(board: Board, indent: int | None = None) -> str:
    """Serialize a board to JSON text."""
    return json.dumps(board_to_data(board), indent=indent)


def decode_board(text: str) -> Board | None:
    """Parse and validate JSON text. Returns None if it isn't a valid board."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("rejected board: invalid JSON: %s", exc)
        return None
    if not is_board(data):
        logger.warning("rejected board: data does not have the board structure")
        return None
    return board_from_data(data)


def export_board(board: Board, directory: str | Path, filename: str = EXPORT_FILENAME) -> Path:
    """Write board as JSON to directory/filename and return the path."""
    path = Path(directory).expanduser() / filename
    path.write_text(encode_board(board, indent=2) + "\n", encoding="utf-8")
    logger.info("exported %d lanes to %s", len(board), path)
    return path


async def read_board_file(path: str | Path) -> Board | None:
    """Read and validate a board file without blocking the event loop."""
    path = Path(path)
    try:
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("cannot read %s: %s", path, exc)
        return None
    return decode_board(text)


async def import_board(state: BoardState, path: str | Path) -> bool:
    """Replace the whole board with the contents of path.

    Leaves the board untouched and returns False if the file can't be read
    or isn't a valid board. Edits made while the read is in flight are
    overwritten by a successful import.
    """
    board = await read_board_file(path)
    if board is None:
        return False
    state.replace(board)
    logger.info("imported %d lanes from %s", len(board), path)
    return True
