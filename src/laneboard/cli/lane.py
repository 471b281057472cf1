"""Handlers for 'laneboard lane' commands."""

from laneboard.cli._common import (
    find_lane_or_die,
    format_lane_line,
    lane_summary,
    load_board_or_die,
    load_config,
    output_json,
    output_result,
    save,
)
from laneboard.model.lane import add_lane, delete_lane, edit_lane_title


def lane_list(args) -> int:
    """List lanes in board order."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    items = [lane_summary(lane, i) for i, lane in enumerate(board, 1)]

    if args.json:
        output_json(items)
    else:
        for item in items:
            print(format_lane_line(item))
    return 0


def lane_add(args) -> int:
    """Append a new lane."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)

    board = add_lane(board)
    lane = board[-1]
    if args.title:
        board = edit_lane_title(board, lane.id, args.title)
        lane = board[-1]
    save(config, board)

    output_result(
        lane_summary(lane, len(board)),
        f"Added lane {lane.id} '{lane.title}'",
        args.json,
    )
    return 0


def lane_rename(args) -> int:
    """Change a lane's title."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    lane = find_lane_or_die(board, args.lane, args.json)

    board = edit_lane_title(board, lane.id, args.title)
    save(config, board)

    output_result(
        {"id": lane.id, "old_title": lane.title, "title": args.title},
        f"Renamed lane {lane.id}: '{lane.title}' -> '{args.title}'",
        args.json,
    )
    return 0


def lane_delete(args) -> int:
    """Delete a lane and its cards."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    lane = find_lane_or_die(board, args.lane, args.json)

    board = delete_lane(board, lane.id)
    save(config, board)

    output_result(
        {"id": lane.id, "title": lane.title, "cards": len(lane.cards)},
        f"Deleted lane {lane.id} '{lane.title}'",
        args.json,
    )
    return 0
