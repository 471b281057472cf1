"""Tests for card mutation operations."""

from laneboard.model.card import NEW_CARD_TITLE, add_card, delete_card, edit_card, find_card

from .conftest import _card_ids, _make_lane


def test_add_card_targets_first_lane_only():
    a, b = _make_lane("a", "c1"), _make_lane("b", "c2")
    board = add_card((a, b))
    assert board[1] is b
    assert len(board[0].cards) == 2
    new = board[0].cards[-1]
    assert new.id.startswith("card-")
    assert new.title == NEW_CARD_TITLE == "New Card"
    assert new.info == ""
    assert _card_ids(a) == ["c1"]


def test_add_card_no_lanes_is_noop():
    board = ()
    assert add_card(board) == ()
    assert add_card(board) is board


def test_add_card_burst_gives_distinct_ids():
    board = (_make_lane("a"),)
    for _ in range(10):
        board = add_card(board)
    assert len(set(_card_ids(board[0]))) == 10


def test_find_card():
    board = (_make_lane("a", "c1"), _make_lane("b", "c2"))
    assert find_card(board, "b", "c2").id == "c2"
    assert find_card(board, "a", "c2") is None
    assert find_card(board, "zzz", "c1") is None


def test_delete_card():
    a, b = _make_lane("a", "c1", "c2", "c3"), _make_lane("b", "c4")
    board = delete_card((a, b), "a", "c2")
    assert _card_ids(board[0]) == ["c1", "c3"]
    assert board[1] is b


def test_delete_card_absent_is_noop():
    board = (_make_lane("a", "c1"), _make_lane("b", "c2"))
    assert delete_card(board, "a", "c2") is board
    assert delete_card(board, "zzz", "c1") is board


def test_edit_card():
    a = _make_lane("a", "c1", "c2")
    board = edit_card((a,), "a", "c2", "Ship it", "before friday")
    card = board[0].cards[1]
    assert (card.id, card.title, card.info) == ("c2", "Ship it", "before friday")
    assert board[0].cards[0] is a.cards[0]
    assert a.cards[1].title == "C2"


def test_edit_card_absent_is_noop():
    board = (_make_lane("a", "c1"),)
    assert edit_card(board, "a", "zzz", "t", "i") is board
    assert edit_card(board, "zzz", "c1", "t", "i") is board
