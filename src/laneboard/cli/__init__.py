"""CLI argument parser and dispatch for laneboard."""

import argparse

from laneboard.cli.board import board_export, board_import, board_show
from laneboard.cli.card import card_add, card_delete, card_edit, card_list, card_move
from laneboard.cli.lane import lane_add, lane_delete, lane_list, lane_rename
from laneboard.cli.web import web


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-dir", dest="data_dir", help="Directory holding the stored board")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    parser = argparse.ArgumentParser(
        prog="laneboard",
        description="Terminal kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- board ---
    board_p = nouns.add_parser("board", help="Whole-board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_show_p = board_verbs.add_parser("show", help="Show lanes and cards", parents=[common])
    board_show_p.set_defaults(func=board_show)

    board_export_p = board_verbs.add_parser("export", help="Export board to data.json", parents=[common])
    board_export_p.add_argument("--out", help="Target directory (default: configured export_dir)")
    board_export_p.set_defaults(func=board_export)

    board_import_p = board_verbs.add_parser("import", help="Replace board from a JSON file", parents=[common])
    board_import_p.add_argument("file", help="Board JSON file")
    board_import_p.set_defaults(func=board_import)

    # board with no verb = show
    board_p.set_defaults(func=board_show)

    # --- lane ---
    lane_p = nouns.add_parser("lane", help="Lane operations", parents=[common])
    lane_verbs = lane_p.add_subparsers(dest="verb")

    lane_list_p = lane_verbs.add_parser("list", help="List lanes", parents=[common])
    lane_list_p.set_defaults(func=lane_list)

    lane_add_p = lane_verbs.add_parser("add", help="Append a lane", parents=[common])
    lane_add_p.add_argument("title", nargs="?", default="", help="Lane title (default: New Lane)")
    lane_add_p.set_defaults(func=lane_add)

    lane_rename_p = lane_verbs.add_parser("rename", help="Rename a lane", parents=[common])
    lane_rename_p.add_argument("lane", help="Lane ID or position (1-indexed)")
    lane_rename_p.add_argument("title", help="New lane title")
    lane_rename_p.set_defaults(func=lane_rename)

    lane_delete_p = lane_verbs.add_parser("delete", help="Delete a lane and its cards", parents=[common])
    lane_delete_p.add_argument("lane", help="Lane ID or position (1-indexed)")
    lane_delete_p.set_defaults(func=lane_delete)

    # lane with no verb = list
    lane_p.set_defaults(func=lane_list)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--lane", help="Only this lane (ID or position)")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Create a card", parents=[common])
    card_add_p.add_argument("title", help="Card title")
    card_add_p.add_argument("--info", default="", help="Card info text")
    card_add_p.add_argument("--lane", help="Target lane (default: first lane)")
    card_add_p.set_defaults(func=card_add)

    card_edit_p = card_verbs.add_parser("edit", help="Edit a card", parents=[common])
    card_edit_p.add_argument("id", help="Card ID")
    card_edit_p.add_argument("--title", help="New title")
    card_edit_p.add_argument("--info", help="New info text")
    card_edit_p.set_defaults(func=card_edit)

    card_delete_p = card_verbs.add_parser("delete", help="Delete a card", parents=[common])
    card_delete_p.add_argument("id", help="Card ID")
    card_delete_p.set_defaults(func=card_delete)

    card_move_p = card_verbs.add_parser("move", help="Move a card", parents=[common])
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--lane", required=True, help="Target lane (ID or position)")
    card_move_p.add_argument("--position", type=int, help="Position in lane (1-indexed)")
    card_move_p.set_defaults(func=card_move)

    # card with no verb = list
    card_p.set_defaults(func=card_list, lane=None)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve the board in a browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8617, help="Port (default: 8617)")
    web_p.set_defaults(func=web)

    return parser
