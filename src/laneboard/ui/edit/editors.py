"""Single-line text editor used by EditableText."""

from __future__ import annotations

from textual.events import Key
from textual.message import Message
from textual.widgets import TextArea


class TextEditor(TextArea):
    """Edits one line of text. Enter or blur keeps it, escape throws it away."""

    class Finished(Message):
        """Editing ended. ``value`` is None when the edit was cancelled."""

        def __init__(self, value: str | None) -> None:
            super().__init__()
            self.value = value

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("soft_wrap", True)
        kwargs.setdefault("compact", True)
        super().__init__(**kwargs)
        self._open = False

    def start_editing(self, value: str) -> None:
        self._open = True
        self.text = value
        self.move_cursor(self.document.end)
        self.focus()

    def _finish(self, value: str | None) -> None:
        if self._open:
            self._open = False
            self.post_message(self.Finished(value))

    async def _on_key(self, event: Key) -> None:
        if event.key not in ("enter", "escape"):
            await super()._on_key(event)
            return
        event.prevent_default()
        event.stop()
        self._finish(self.text if event.key == "enter" else None)

    def on_blur(self) -> None:
        self._finish(self.text)
