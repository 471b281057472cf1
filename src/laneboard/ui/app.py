"""Main Textual application for laneboard."""

from textual.app import App

from laneboard.config import Config
from laneboard.model.state import BoardState
from laneboard.persist import PersistenceBridge
from laneboard.ui.board import BoardScreen


class LaneboardApp(App):
    """Terminal kanban board.

    Owns the board state and the persistence bridge, and hands the state
    to the board screen by reference.
    """

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "laneboard"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, config: Config | None = None):
        super().__init__()
        self.config = config or Config.load()
        self.state = BoardState()
        self.bridge = PersistenceBridge(
            self.state,
            self.config.storage(),
            key=self.config.storage_key,
            delay=float(self.config.save_delay),
        )

    def on_mount(self) -> None:
        self.bridge.restore()
        if self.bridge.rejected:
            path = self.bridge.storage.path_for(self.bridge.key)
            self.notify(f"Ignored invalid board in {path}", severity="warning")
        self.bridge.attach()
        self.push_screen(BoardScreen(self.state, self.config))

    def save_now(self) -> None:
        """Write the board to storage immediately."""
        self.bridge.save_now()

    def action_quit(self) -> None:
        """Write any pending save and quit."""
        self.bridge.flush()
        self.bridge.close()
        self.exit()
