"""Handlers for 'laneboard board' commands."""

import asyncio
from pathlib import Path

from laneboard.cli._common import (
    error,
    format_lane_line,
    lane_summary,
    load_board_or_die,
    load_config,
    output_json,
    output_result,
    save,
)
from laneboard.models import board_to_data
from laneboard.transfer import export_board, read_board_file


def board_show(args) -> int:
    """Show lanes and cards."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)

    if args.json:
        output_json(board_to_data(board))
        return 0

    if not board:
        print("(empty board)")
        return 0
    for i, lane in enumerate(board, 1):
        print(format_lane_line(lane_summary(lane, i)))
        for card in lane.cards:
            print(f"    {card.id}  {card.title}")
    return 0


def board_export(args) -> int:
    """Write the board to a data.json file."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    directory = args.out or config.export_dir

    try:
        path = export_board(board, directory, config.export_filename)
    except OSError as e:
        error(f"Cannot export to {directory}: {e}", args.json)

    output_result(
        {"path": str(path), "lanes": len(board)},
        f"Exported {len(board)} lanes to {path}",
        args.json,
    )
    return 0


def board_import(args) -> int:
    """Replace the board with the contents of a JSON file."""
    config = load_config(args)
    load_board_or_die(config, args.json)
    path = Path(args.file)

    board = asyncio.run(read_board_file(path))
    if board is None:
        error(f"{path} is not a valid board file.", args.json)

    save(config, board)
    cards = sum(len(lane.cards) for lane in board)
    output_result(
        {"path": str(path), "lanes": len(board), "cards": cards},
        f"Imported {len(board)} lanes and {cards} cards from {path}",
        args.json,
    )
    return 0
