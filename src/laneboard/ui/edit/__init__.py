"""Editable widget components."""

from laneboard.ui.edit.editable import EditableText
from laneboard.ui.edit.editors import TextEditor

__all__ = [
    "EditableText",
    "TextEditor",
]
