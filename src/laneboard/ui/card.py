"""Card widgets for laneboard UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import Static

from laneboard.models import Card
from laneboard.ui.constants import ICON_INFO
from laneboard.ui.drag import DraggableMixin
from laneboard.ui.static import PlainStatic


def info_preview(info: str, width: int = 40) -> Text:
    """First line of a card's info, dimmed and truncated."""
    if not info.strip():
        return Text("")
    first = info.strip().splitlines()[0]
    if len(first) > width:
        first = first[: width - 1] + "…"
    return Text.assemble(f"{ICON_INFO} ", (first, "dim"))


class CardWidget(DraggableMixin, Static, can_focus=True):
    """A single card in a lane."""

    BINDINGS = [
        ("space", "open_card"),
        ("enter", "open_card"),
        ("delete", "delete_card"),
    ]

    class OpenRequested(Message):
        """Posted when the card should be opened for editing."""

        def __init__(self, card: "CardWidget") -> None:
            super().__init__()
            self.card = card

    class DeleteRequested(Message):
        """Posted when the card should be deleted."""

        def __init__(self, card: "CardWidget") -> None:
            super().__init__()
            self.card = card

    class DragCancelled(Message):
        """Posted when a drag ends outside any lane."""

        def __init__(self, card: "CardWidget") -> None:
            super().__init__()
            self.card = card

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
        border-left: tall $primary-darken-2;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.dragging {
        display: none;
    }
    CardWidget #card-info {
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, card: Card, lane_id: str):
        Static.__init__(self)
        self._init_draggable()
        self.card = card
        self.lane_id = lane_id

    @property
    def card_id(self) -> str:
        return self.card.id

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.card.title or self.card.id, id="card-title")
        yield PlainStatic(info_preview(self.card.info), id="card-info")

    def update_card(self, card: Card, lane_id: str) -> None:
        """Show new card content."""
        self.lane_id = lane_id
        if card == self.card:
            return
        self.card = card
        self.query_one("#card-title", PlainStatic).update(card.title or card.id)
        self.query_one("#card-info", PlainStatic).update(info_preview(card.info))

    def action_open_card(self) -> None:
        self.post_message(self.OpenRequested(self))

    def action_delete_card(self) -> None:
        self.post_message(self.DeleteRequested(self))

    def draggable_make_ghost(self):
        return DragGhost(self.card)

    def draggable_clicked(self) -> None:
        self.focus()
        self.post_message(self.OpenRequested(self))

    def _drag_cancel(self) -> None:
        if self.is_dragging:
            super()._drag_cancel()
            self.post_message(self.DragCancelled(self))


class DragGhost(Static):
    """Floating overlay showing the card being dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        opacity: 0.8;
    }
    """

    def __init__(self, card: Card):
        super().__init__()
        self._card = card

    def compose(self) -> ComposeResult:
        yield CardWidget(self._card, "")
