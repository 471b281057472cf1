"""Mouse drag and drop for cards.

A draggable widget turns into a drag once the pointer moves a few cells
with the button held. From then on the screen forwards mouse events to it,
and it asks the DropTargets under the pointer to preview or take the drop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.widget import Widget


class DropTarget:
    """Mixin for widgets that cards can be dropped on."""

    def drag_over(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """Preview a drop at (x, y). Return True if this target would take it."""
        return False

    def drag_away(self, draggable: DraggableMixin) -> None:
        """Forget any preview for draggable."""

    def try_drop(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """Take the drop at (x, y). Return False to let an outer target try."""
        return False


@dataclass
class DragSession:
    """A drag in flight."""

    ghost: Widget
    grab: Offset
    target: DropTarget | None = None


class DraggableMixin:
    """Mixin for widgets that can be picked up with the mouse.

    Call ``_init_draggable()`` from ``__init__`` and implement
    ``draggable_make_ghost`` and ``draggable_clicked``. The screen must hold
    an ``_active_draggable`` attribute and forward mouse moves and releases
    to ``_drag_move`` and ``_drag_finish`` while it is set.
    """

    DRAG_THRESHOLD = 2

    def _init_draggable(self) -> None:
        self._press: Offset | None = None
        self._drag: DragSession | None = None

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def on_mouse_down(self, event) -> None:
        if event.button != 1:
            return
        event.stop()
        event.prevent_default()
        self._press = event.screen_offset
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._press is None:
            return
        event.stop()
        event.prevent_default()
        delta = event.screen_offset - self._press
        if max(abs(delta.x), abs(delta.y)) > self.DRAG_THRESHOLD:
            self.release_mouse()
            press, self._press = self._press, None
            self._drag_start(press)

    def on_mouse_up(self, event) -> None:
        event.stop()
        event.prevent_default()
        self.release_mouse()
        if self._press is not None:
            self._press = None
            self.draggable_clicked()

    def _drag_start(self, press: Offset) -> None:
        region = self.region
        ghost = self.draggable_make_ghost()
        ghost.styles.width = region.width
        ghost.styles.offset = (region.x, region.y)
        self._drag = DragSession(ghost, press - region.offset)
        self.add_class("dragging")

        screen = self.screen
        screen.set_focus(None)
        screen.mount(ghost)
        screen._active_draggable = self
        screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        drag = self._drag
        if drag is None:
            return
        drag.ghost.styles.offset = (x - drag.grab.x, y - drag.grab.y)
        targets = self._targets_at(x, y)
        if not targets:
            # keep the last preview while the pointer is between lanes
            return
        target = targets[0]
        if target is not drag.target:
            if drag.target is not None:
                drag.target.drag_away(self)
            drag.target = target
        target.drag_over(self, x, y)

    def _drag_finish(self, x: int, y: int) -> None:
        """Drop on the innermost target that takes it, or cancel."""
        if self._drag is None:
            return
        self.screen.release_mouse()
        for target in self._targets_at(x, y):
            if target.try_drop(self, x, y):
                self._drag.target = None
                self._drag_end()
                return
        self._drag_cancel()

    def _drag_cancel(self) -> None:
        if self._drag is None:
            return
        self.screen.release_mouse()
        if self._drag.target is not None:
            self._drag.target.drag_away(self)
        self._drag_end()

    def _drag_end(self) -> None:
        drag, self._drag = self._drag, None
        drag.ghost.remove()
        self.remove_class("dragging")
        self.screen._active_draggable = None

    def _targets_at(self, x: int, y: int) -> list[DropTarget]:
        """DropTargets under (x, y), innermost first, looking through the ghost."""
        ghost = self._drag.ghost if self._drag is not None else None
        found: list[DropTarget] = []
        for widget, _region in self.screen.get_widgets_at(x, y):
            if ghost is not None and (widget is ghost or ghost in widget.ancestors):
                continue
            for node in (widget, *widget.ancestors):
                if isinstance(node, DropTarget) and node is not self and node not in found:
                    found.append(node)
        return found

    def draggable_make_ghost(self) -> Widget:
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        raise NotImplementedError


class CardPlaceholder(Static):
    """Dashed box showing where a dragged card will land."""

    DEFAULT_CSS = """
    CardPlaceholder {
        width: 100%;
        height: 3;
        margin-bottom: 1;
        border: dashed $primary;
        background: $surface-darken-1;
    }
    """
