"""Card mutation operations for laneboard boards."""

from dataclasses import replace

from laneboard.ids import make_id
from laneboard.models import Board, Card, board_ids, find_lane, replace_lanes

NEW_CARD_TITLE = "New Card"


def add_card(board: Board) -> Board:
    """Append a new card to the first lane. No-op on a board without lanes."""
    if not board:
        return board
    lane = board[0]
    card = Card(id=make_id("card", board_ids(board)), title=NEW_CARD_TITLE, info="")
    return replace_lanes(board, replace(lane, cards=(*lane.cards, card)))


def find_card(board: Board, lane_id: str, card_id: str) -> Card | None:
    """Find a card by id within a lane."""
    lane = find_lane(board, lane_id)
    if lane is None:
        return None
    return next((card for card in lane.cards if card.id == card_id), None)


def delete_card(board: Board, lane_id: str, card_id: str) -> Board:
    """Remove a card from its lane."""
    if find_card(board, lane_id, card_id) is None:
        return board
    lane = find_lane(board, lane_id)
    cards = tuple(card for card in lane.cards if card.id != card_id)
    return replace_lanes(board, replace(lane, cards=cards))


def edit_card(board: Board, lane_id: str, card_id: str, title: str, info: str) -> Board:
    """Replace the title and info of a card."""
    card = find_card(board, lane_id, card_id)
    if card is None or (card.title, card.info) == (title, info):
        return board
    lane = find_lane(board, lane_id)
    edited = replace(card, title=title, info=info)
    cards = tuple(edited if c.id == card_id else c for c in lane.cards)
    return replace_lanes(board, replace(lane, cards=cards))
