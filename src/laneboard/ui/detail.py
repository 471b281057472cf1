"""Modal for editing a card's title and info."""

from __future__ import annotations

from dataclasses import dataclass

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, TextArea

from laneboard.models import Card


@dataclass(frozen=True)
class CardEdit:
    """What the user chose in the card modal."""

    title: str = ""
    info: str = ""
    delete: bool = False


class CardDetailModal(ModalScreen[CardEdit | None]):
    """Edit a card's title and info. Dismisses with None on cancel."""

    DEFAULT_CSS = """
    CardDetailModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #card-dialog {
        width: 70;
        height: auto;
        max-height: 90%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #card-dialog Label {
        margin-top: 1;
        color: $text-muted;
    }
    #card-info-input {
        height: 10;
    }
    #card-buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: right middle;
    }
    #card-buttons Button {
        margin-left: 2;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+s", "save", "Save"),
    ]

    def __init__(self, card: Card):
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        with Vertical(id="card-dialog"):
            yield Label("Title")
            yield Input(self.card.title, id="card-title-input")
            yield Label("Info")
            yield TextArea(self.card.info, id="card-info-input")
            with Horizontal(id="card-buttons"):
                yield Button("Delete", id="delete", variant="error")
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#card-title-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        match event.button.id:
            case "save":
                self.action_save()
            case "delete":
                self.dismiss(CardEdit(self.card.title, self.card.info, delete=True))
            case _:
                self.action_cancel()

    def action_save(self) -> None:
        title = self.query_one("#card-title-input", Input).value
        info = self.query_one("#card-info-input", TextArea).text
        self.dismiss(CardEdit(title, info))

    def action_cancel(self) -> None:
        self.dismiss(None)
