"""Modal screens for choosing import and export locations."""

from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Label


class ImportFileScreen(ModalScreen[Path | None]):
    """Browse for a board file to import. Dismisses with the chosen path."""

    DEFAULT_CSS = """
    ImportFileScreen {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #import-dialog {
        width: 80%;
        height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #import-tree {
        height: 1fr;
    }
    #import-buttons {
        height: 3;
        align: right middle;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, start: str | Path = "."):
        super().__init__()
        self.start = Path(start).expanduser()

    def compose(self) -> ComposeResult:
        with Vertical(id="import-dialog"):
            yield Label("Choose a board file to import")
            yield DirectoryTree(self.start, id="import-tree")
            with Horizontal(id="import-buttons"):
                yield Button("Cancel", id="cancel")

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        event.stop()
        self.dismiss(Path(event.path))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(None)


class ExportDirScreen(ModalScreen[Path | None]):
    """Ask for the directory to export into. Dismisses with the directory."""

    DEFAULT_CSS = """
    ExportDirScreen {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #export-dialog {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #export-buttons {
        height: 3;
        margin-top: 1;
        align: right middle;
    }
    #export-buttons Button {
        margin-left: 2;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, directory: str | Path = ".", filename: str = "data.json"):
        super().__init__()
        self.directory = str(directory)
        self.filename = filename

    def compose(self) -> ComposeResult:
        with Vertical(id="export-dialog"):
            yield Label(f"Export {self.filename} to directory")
            yield Input(self.directory, id="export-dir")
            with Horizontal(id="export-buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Export", id="export", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#export-dir", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "export":
            self._submit()
        else:
            self.action_cancel()

    def _submit(self) -> None:
        value = self.query_one("#export-dir", Input).value.strip()
        self.dismiss(Path(value or ".").expanduser())

    def action_cancel(self) -> None:
        self.dismiss(None)
