"""Click-to-edit text widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.widget import Widget
from textual.widgets import ContentSwitcher

from laneboard.ui.edit.editors import TextEditor


class _View(Container):
    """Focusable holder for the viewer. Gaining focus starts an edit."""

    can_focus = True

    DEFAULT_CSS = """
    _View {
        width: 100%;
        height: auto;
    }
    """

    def on_focus(self) -> None:
        owner = next((a for a in self.ancestors if isinstance(a, EditableText)), None)
        if owner is None:
            return
        if owner._returning:
            owner._returning = False
        else:
            owner._start_edit()


class EditableText(Container):
    """Shows a value in ``viewer`` and swaps to ``editor`` to change it.

    Values are kept on one line with runs of whitespace collapsed. Edits
    by the user post ``Changed``; ``set_value_quietly`` is for values that
    come from the board and must not echo back.
    """

    DEFAULT_CSS = """
    EditableText {
        width: 100%;
        height: auto;
    }
    EditableText > ContentSwitcher {
        width: 100%;
        height: auto;
    }
    EditableText #edit {
        width: 100%;
        height: auto;
    }
    """

    class Changed(Message):
        """The user changed the value."""

        def __init__(self, old_value: str, new_value: str) -> None:
            super().__init__()
            self.old_value = old_value
            self.new_value = new_value

        @property
        def control(self) -> EditableText:
            return self._sender

    def __init__(self, value: str, viewer: Widget, editor: TextEditor, *, placeholder: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._value = self._clean(value)
        self._viewer = viewer
        self._editor = editor
        self._placeholder = placeholder
        self._editing = False
        # set while focus goes back to the view after an edit
        self._returning = False

    @staticmethod
    def _clean(text: str) -> str:
        return " ".join(text.split())

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, new_value: str) -> None:
        old_value = self._value
        if self._show(new_value):
            self.post_message(self.Changed(old_value, self._value))

    def set_value_quietly(self, new_value: str) -> None:
        self._show(new_value)

    def _show(self, new_value: str) -> bool:
        new_value = self._clean(new_value)
        if new_value == self._value:
            return False
        self._value = new_value
        self._viewer.update(new_value or self._placeholder)
        return True

    @property
    def editing(self) -> bool:
        return self._editing

    def compose(self) -> ComposeResult:
        self._editor.id = "edit"
        with ContentSwitcher(initial="view"):
            yield _View(self._viewer, id="view")
            yield self._editor

    def on_mount(self) -> None:
        self._viewer.update(self._value or self._placeholder)

    def focus(self, scroll_visible: bool = True) -> EditableText:
        """Focus the editor while editing, otherwise the view, which starts an edit."""
        if self._editing:
            self._editor.focus(scroll_visible)
        else:
            self._returning = False
            self.query_one("#view", _View).focus(scroll_visible)
        return self

    def on_click(self, event) -> None:
        event.stop()
        if not self.disabled:
            self._start_edit()

    def _start_edit(self) -> None:
        if self._editing:
            return
        self._editing = True
        self.query_one(ContentSwitcher).current = "edit"
        self._editor.start_editing(self._value)

    def on_text_editor_finished(self, event: TextEditor.Finished) -> None:
        event.stop()
        if not self._editing:
            return
        self._editing = False
        self._returning = True
        self.query_one(ContentSwitcher).current = "view"
        if event.value is not None:
            self.value = event.value
