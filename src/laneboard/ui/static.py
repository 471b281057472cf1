"""Static widget variants."""

from textual.events import Click, MouseDown
from textual.message import Message
from textual.widgets import Static

from laneboard.ui.constants import ICON_DELETE


class PlainStatic(Static):
    """Static that doesn't allow text selection."""

    ALLOW_SELECT = False


class DeleteButton(Static):
    """Small icon button that posts Pressed when clicked."""

    class Pressed(Message):
        """Posted when the button is clicked."""

        @property
        def control(self) -> "DeleteButton":
            return self._sender

    DEFAULT_CSS = """
    DeleteButton {
        width: auto;
        height: 1;
        padding: 0 1;
    }
    DeleteButton:hover {
        background: $error;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(ICON_DELETE, **kwargs)

    def on_mouse_down(self, event: MouseDown) -> None:
        # keep the press away from draggable parents
        event.stop()

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Pressed())
