"""Integration tests for the board app."""

import json

import pytest
from textual.widgets import Input

from laneboard.models import Card, Lane
from laneboard.transfer import export_board
from laneboard.ui.app import LaneboardApp
from laneboard.ui.board import BoardScreen
from laneboard.ui.card import CardWidget
from laneboard.ui.detail import CardDetailModal
from laneboard.ui.edit import EditableText
from laneboard.ui.lane import LaneEnd, LaneWidget
from tests.ui.conftest import SIZE


def _lane_titles(app):
    return [lane.title for lane in app.state.board]


def _card_ids(app, lane_index=0):
    return [card.id for card in app.state.board[lane_index].cards]


def _widget_card_ids(lane_widget):
    return [c.card_id for c in lane_widget.card_widgets()]


@pytest.mark.asyncio
async def test_starts_empty(config):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        assert isinstance(app.screen, BoardScreen)
        assert app.state.board == ()
        assert app.screen.lane_widgets() == []
        assert not app.bridge.rejected


@pytest.mark.asyncio
async def test_restores_stored_board(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        assert app.state.board == seeded
        lanes = app.screen.lane_widgets()
        assert [w.lane_id for w in lanes] == ["lane-1", "lane-2"]
        assert _widget_card_ids(lanes[0]) == ["card-1", "card-2"]
        assert not app.bridge.pending


@pytest.mark.asyncio
async def test_invalid_stored_board_is_ignored(config):
    config.data_path.mkdir(parents=True)
    (config.data_path / "data.json").write_text('{"foo": "bar"}')
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        assert app.bridge.rejected
        assert app.state.board == ()


@pytest.mark.asyncio
async def test_toolbar_adds_lane_and_card(config):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await pilot.click("#add-card")
        await pilot.pause()
        assert app.state.board == ()

        await pilot.click("#add-lane")
        await pilot.pause()
        assert _lane_titles(app) == ["New Lane"]
        assert len(app.screen.lane_widgets()) == 1

        await pilot.click("#add-card")
        await pilot.pause()
        card = app.state.board[0].cards[0]
        assert card.title == "New Card"
        assert _widget_card_ids(app.screen.lane_widgets()[0]) == [card.id]
        assert app.bridge.pending


@pytest.mark.asyncio
async def test_keyboard_shortcuts_add(config):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await pilot.press("ctrl+l", "ctrl+l", "ctrl+n")
        await pilot.pause()
        assert len(app.state.board) == 2
        assert len(app.state.board[0].cards) == 1
        assert app.state.board[0].id != app.state.board[1].id


@pytest.mark.asyncio
async def test_quit_flushes_pending_save(config):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await pilot.press("ctrl+l")
        await pilot.pause()
        assert not (config.data_path / "data.json").exists()
        await pilot.press("ctrl+q")

    saved = json.loads((config.data_path / "data.json").read_text())
    assert [lane["title"] for lane in saved] == ["New Lane"]


@pytest.mark.asyncio
async def test_ctrl_s_saves_now(config):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await pilot.press("ctrl+l", "ctrl+s")
        await pilot.pause()
        assert (config.data_path / "data.json").exists()
        assert not app.bridge.pending


@pytest.mark.asyncio
async def test_delete_lane(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await pilot.click("#delete-lane")
        await pilot.pause()
        assert [lane.id for lane in app.state.board] == ["lane-2"]
        assert [w.lane_id for w in app.screen.lane_widgets()] == ["lane-2"]


@pytest.mark.asyncio
async def test_edit_lane_title(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        lane = app.screen.lane_widgets()[1]
        lane.query_one(EditableText).value = "Finished"
        await pilot.pause()
        assert _lane_titles(app) == ["Todo", "Finished"]


@pytest.mark.asyncio
async def test_delete_card_key(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.screen.lane_widgets()[0].card_widgets()[0].focus()
        await pilot.press("delete")
        await pilot.pause()
        assert _card_ids(app) == ["card-2"]


@pytest.mark.asyncio
async def test_shift_down_reorders(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        lane = app.screen.lane_widgets()[0]
        lane.card_widgets()[0].focus()
        await pilot.press("shift+down")
        await pilot.pause()
        assert _card_ids(app) == ["card-2", "card-1"]
        assert _widget_card_ids(lane) == ["card-2", "card-1"]


@pytest.mark.asyncio
async def test_shift_up_at_top_does_nothing(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.screen.lane_widgets()[0].card_widgets()[0].focus()
        await pilot.press("shift+up")
        await pilot.pause()
        assert app.state.board == seeded
        assert app.state.version == 1


@pytest.mark.asyncio
async def test_shift_right_moves_to_next_lane(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.screen.lane_widgets()[0].card_widgets()[1].focus()
        await pilot.press("shift+right")
        await pilot.pause()
        assert _card_ids(app, 0) == ["card-1"]
        assert _card_ids(app, 1) == ["card-2"]
        assert _widget_card_ids(app.screen.lane_widgets()[1]) == ["card-2"]


@pytest.mark.asyncio
async def test_drop_on_lane_end_appends(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        first, second = app.screen.lane_widgets()
        card = first.card_widgets()[0]
        end_y = second.query_one(LaneEnd).region.y + 1
        assert second.try_drop(card, 0, end_y)
        await pilot.pause()
        assert _card_ids(app, 0) == ["card-2"]
        assert _card_ids(app, 1) == ["card-1"]


@pytest.mark.asyncio
async def test_drop_within_lane(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        lane = app.screen.lane_widgets()[0]
        card = lane.card_widgets()[0]
        assert lane.try_drop(card, 0, 10_000)
        await pilot.pause()
        assert _card_ids(app) == ["card-2", "card-1"]


@pytest.mark.asyncio
async def test_drop_in_place_changes_nothing(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        lane = app.screen.lane_widgets()[0]
        card = lane.card_widgets()[0]
        assert lane.try_drop(card, 0, 0)
        await pilot.pause()
        assert app.state.board == seeded
        assert not app.bridge.pending


@pytest.mark.asyncio
async def test_cancelled_drag_changes_nothing(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        card = app.screen.lane_widgets()[0].card_widgets()[0]
        card._drag_start(card.region.offset)
        await pilot.pause()
        assert card.is_dragging
        await pilot.press("escape")
        await pilot.pause()
        assert not card.is_dragging
        assert app.screen._active_draggable is None
        assert app.state.board == seeded
        await pilot.pause()
        assert app.screen.focused is card


@pytest.mark.asyncio
async def test_card_modal_edits_card(config, seeded):
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.screen.lane_widgets()[0].card_widgets()[1].focus()
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, CardDetailModal)

        title = app.screen.query_one("#card-title-input", Input)
        title.value = "Renamed"
        title.focus()
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, BoardScreen)
        assert app.state.board[0].cards[1] == Card("card-2", "Renamed", "")


@pytest.mark.asyncio
async def test_import_replaces_board(config, seeded, tmp_path):
    imported = (Lane("lane-x", "Imported", (Card("card-x", "X", ""),)),)
    path = export_board(imported, tmp_path, "import.json")
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await app.screen._import_from(path)
        await pilot.pause()
        assert app.state.board == imported
        assert [w.lane_id for w in app.screen.lane_widgets()] == ["lane-x"]


@pytest.mark.asyncio
async def test_import_invalid_keeps_board(config, seeded, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"foo": "bar"}')
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        await app.screen._import_from(path)
        await pilot.pause()
        assert app.state.board == seeded


@pytest.mark.asyncio
async def test_export_writes_file(config, seeded, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    app = LaneboardApp(config)
    async with app.run_test(size=SIZE) as pilot:
        await pilot.pause()
        app.screen._on_export_chosen(out)
        await pilot.pause()
    data = json.loads((out / "data.json").read_text())
    assert [lane["id"] for lane in data] == ["lane-1", "lane-2"]
