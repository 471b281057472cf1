"""Handlers for 'laneboard card' commands."""

from laneboard.cli._common import (
    error,
    find_card_or_die,
    find_lane_or_die,
    load_board_or_die,
    load_config,
    output_json,
    output_result,
    save,
)
from laneboard.model.card import add_card, delete_card, edit_card
from laneboard.model.move import locate_card, move_card_to
from laneboard.models import board_ids, find_lane


def _card_dict(card, lane) -> dict:
    return {"id": card.id, "title": card.title, "info": card.info, "lane": {"id": lane.id, "title": lane.title}}


def card_list(args) -> int:
    """List cards grouped by lane."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)

    lanes = [find_lane_or_die(board, args.lane, args.json)] if args.lane else list(board)

    if args.json:
        output_json([_card_dict(card, lane) for lane in lanes for card in lane.cards])
    else:
        for lane in lanes:
            print(f"{lane.id}  {lane.title}")
            for card in lane.cards:
                print(f"  {card.id}  {card.title}")
    return 0


def card_add(args) -> int:
    """Create a card in the first lane, or in --lane."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    if not board:
        error("Board has no lanes. Add one with 'laneboard lane add'.", args.json)

    before = board_ids(board)
    board = add_card(board)
    card_id = (board_ids(board) - before).pop()
    lane_id = board[0].id

    if args.lane:
        lane_id = find_lane_or_die(board, args.lane, args.json).id
        board = move_card_to(board, card_id, lane_id)

    board = edit_card(board, lane_id, card_id, args.title, args.info)
    save(config, board)

    lane = find_lane(board, lane_id)
    output_result(
        {"id": card_id, "title": args.title, "lane": {"id": lane.id, "title": lane.title}},
        f"Added card {card_id} '{args.title}' to {lane.title}",
        args.json,
    )
    return 0


def card_edit(args) -> int:
    """Change a card's title and/or info."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    lane, card = find_card_or_die(board, args.id, args.json)

    title = card.title if args.title is None else args.title
    info = card.info if args.info is None else args.info
    board = edit_card(board, lane.id, card.id, title, info)
    save(config, board)

    output_result(
        {"id": card.id, "title": title, "info": info},
        f"Updated card {card.id}",
        args.json,
    )
    return 0


def card_delete(args) -> int:
    """Delete a card."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    lane, card = find_card_or_die(board, args.id, args.json)

    board = delete_card(board, lane.id, card.id)
    save(config, board)

    output_result(
        {"id": card.id, "title": card.title, "lane": lane.id},
        f"Deleted card {card.id} '{card.title}'",
        args.json,
    )
    return 0


def card_move(args) -> int:
    """Move a card to a lane, optionally at a 1-indexed position."""
    config = load_config(args)
    board = load_board_or_die(config, args.json)
    _, card = find_card_or_die(board, args.id, args.json)
    target = find_lane_or_die(board, args.lane, args.json)

    index = None
    if args.position is not None:
        if args.position < 1:
            error("Position must be 1 or greater.", args.json)
        index = args.position - 1

    board = move_card_to(board, card.id, target.id, index)
    save(config, board)

    location = locate_card(board, card.id)
    output_result(
        {"id": card.id, "lane": {"id": target.id, "title": target.title}, "position": location.index + 1},
        f"Moved card {card.id} to {target.title} at position {location.index + 1}",
        args.json,
    )
    return 0
