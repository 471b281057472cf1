"""Board screen showing lanes and cards."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, HorizontalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer

from laneboard.config import Config
from laneboard.model.card import add_card, delete_card, edit_card, find_card
from laneboard.model.lane import add_lane, delete_lane, edit_lane_title
from laneboard.model.move import move_card
from laneboard.model.state import BoardState
from laneboard.models import Board, find_lane
from laneboard.transfer import export_board, import_board
from laneboard.ui.card import CardWidget
from laneboard.ui.constants import ICON_ADD, ICON_EXPORT, ICON_IMPORT
from laneboard.ui.detail import CardDetailModal, CardEdit
from laneboard.ui.files import ExportDirScreen, ImportFileScreen
from laneboard.ui.lane import LaneWidget
from laneboard.ui.watcher import StateWatcherMixin

logger = logging.getLogger(__name__)


class BoardScreen(StateWatcherMixin, Screen):
    """Main board screen showing all lanes."""

    DEFAULT_CSS = """
    BoardScreen {
        layers: default overlay;
    }
    #toolbar {
        width: 100%;
        height: 3;
        padding: 0 1;
    }
    #toolbar Button {
        margin-right: 1;
    }
    #lanes {
        width: 100%;
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("ctrl+l", "add_lane", "Add lane"),
        ("ctrl+n", "add_card", "Add card"),
        ("ctrl+o", "import", "Import"),
        ("ctrl+e", "export", "Export"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, state: BoardState, config: Config):
        self._init_watcher()
        super().__init__()
        self.state = state
        self.config = config
        self._active_draggable = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="toolbar"):
            yield Button(f"{ICON_ADD} Add Lane", id="add-lane")
            yield Button(f"{ICON_ADD} Add Card", id="add-card")
            yield Button(f"{ICON_IMPORT} Import", id="import")
            yield Button(f"{ICON_EXPORT} Export", id="export")

        with HorizontalScroll(id="lanes"):
            for lane in self.state.board:
                yield LaneWidget(lane)

        yield Footer()

    def on_mount(self) -> None:
        self.state_watch(self.state, self._on_board_changed)
        self.call_after_refresh(self._focus_first_card)

    def lane_widgets(self) -> list[LaneWidget]:
        """Lane widgets in display order."""
        return [w for w in self.query_one("#lanes", HorizontalScroll).children if isinstance(w, LaneWidget)]

    def _focus_first_card(self) -> None:
        for lane in self.lane_widgets():
            cards = lane.card_widgets()
            if cards:
                cards[0].focus()
                return

    def _focus_card(self, card_id: str) -> None:
        for lane in self.lane_widgets():
            for card in lane.card_widgets():
                if card.card_id == card_id:
                    card.focus()
                    return

    # -- Keeping widgets in step with the state --

    def _on_board_changed(self, old: Board, new: Board) -> None:
        self._sync_lanes(new)

    def _sync_lanes(self, board: Board) -> None:
        """Add, remove, update and reorder lane widgets to match board."""
        container = self.query_one("#lanes", HorizontalScroll)
        existing = {w.lane_id: w for w in self.lane_widgets()}
        wanted = {lane.id for lane in board}

        for lane_id, widget in existing.items():
            if lane_id not in wanted:
                widget.remove()

        widgets = []
        for lane in board:
            widget = existing.get(lane.id)
            if widget is None:
                widget = LaneWidget(lane)
                container.mount(widget)
            else:
                widget.update_lane(lane)
            widgets.append(widget)

        for before, after in zip(widgets, widgets[1:]):
            container.move_child(after, after=before)

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()

    # -- Toolbar --

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "add-lane": self.action_add_lane,
            "add-card": self.action_add_card,
            "import": self.action_import,
            "export": self.action_export,
        }
        action = actions.get(event.button.id)
        if action is not None:
            event.stop()
            action()

    def action_add_lane(self) -> None:
        self.state.apply(add_lane)

    def action_add_card(self) -> None:
        if not self.state.board:
            self.notify("Add a lane first", severity="warning")
            return
        self.state.apply(add_card)
        self.call_after_refresh(self._focus_card, self.state.board[0].cards[-1].id)

    def action_save(self) -> None:
        self.app.save_now()
        self.notify("Saved")

    def action_import(self) -> None:
        self.app.push_screen(ImportFileScreen(self.config.export_dir), self._on_import_chosen)

    def _on_import_chosen(self, path: Path | None) -> None:
        if path is not None:
            self.run_worker(self._import_from(path), exclusive=True, group="import")

    async def _import_from(self, path: Path) -> None:
        if await import_board(self.state, path):
            self.notify(f"Imported {path.name}")
        else:
            self.notify(f"{path.name} is not a valid board file", severity="warning")

    def action_export(self) -> None:
        screen = ExportDirScreen(self.config.export_dir, self.config.export_filename)
        self.app.push_screen(screen, self._on_export_chosen)

    def _on_export_chosen(self, directory: Path | None) -> None:
        if directory is None:
            return
        try:
            path = export_board(self.state.board, directory, self.config.export_filename)
        except OSError as e:
            logger.warning("export to %s failed: %s", directory, e)
            self.notify(f"Export failed: {e}", severity="error")
            return
        self.notify(f"Exported to {path}")

    # -- Lane and card requests --

    def on_lane_widget_title_changed(self, event: LaneWidget.TitleChanged) -> None:
        event.stop()
        self.state.apply(edit_lane_title, event.lane_id, event.title)

    def on_lane_widget_delete_requested(self, event: LaneWidget.DeleteRequested) -> None:
        event.stop()
        self.state.apply(delete_lane, event.lane_id)

    def on_lane_widget_card_moved(self, event: LaneWidget.CardMoved) -> None:
        event.stop()
        source = event.result.source
        lane = find_lane(self.state.board, source.lane_id)
        card_id = lane.cards[source.index].id if lane and 0 <= source.index < len(lane.cards) else None
        self.state.apply(move_card, event.result)
        if card_id is not None:
            self.call_after_refresh(self._focus_card, card_id)

    def on_card_widget_drag_cancelled(self, event: CardWidget.DragCancelled) -> None:
        event.stop()
        self.call_after_refresh(self._focus_card, event.card.card_id)

    def on_card_widget_delete_requested(self, event: CardWidget.DeleteRequested) -> None:
        event.stop()
        self.state.apply(delete_card, event.card.lane_id, event.card.card_id)

    def on_card_widget_open_requested(self, event: CardWidget.OpenRequested) -> None:
        event.stop()
        lane_id, card_id = event.card.lane_id, event.card.card_id
        card = find_card(self.state.board, lane_id, card_id)
        if card is None:
            return

        def on_closed(result: CardEdit | None) -> None:
            if result is None:
                return
            if result.delete:
                self.state.apply(delete_card, lane_id, card_id)
            else:
                self.state.apply(edit_card, lane_id, card_id, result.title, result.info)

        self.app.push_screen(CardDetailModal(card), on_closed)
