"""Lane widgets for laneboard UI."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Rule, Static

from laneboard.model.move import DragResult, Location
from laneboard.models import Lane
from laneboard.ui.card import CardWidget
from laneboard.ui.drag import CardPlaceholder, DropTarget
from laneboard.ui.edit import EditableText, TextEditor
from laneboard.ui.static import DeleteButton


class LaneEnd(Static):
    """Empty area at the bottom of a lane. Cards dropped here are appended."""

    DEFAULT_CSS = """
    LaneEnd {
        width: 100%;
        height: 1fr;
        min-height: 3;
    }
    """


class LaneWidget(DropTarget, Vertical):
    """A single lane on the board."""

    DEFAULT_CSS = """
    LaneWidget {
        width: 1fr;
        height: 100%;
        min-width: 28;
        max-width: 28;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    LaneWidget > .lane-header {
        width: 100%;
        height: auto;
    }
    LaneWidget > .lane-header > EditableText {
        width: 1fr;
    }
    LaneWidget > .lane-header > EditableText > ContentSwitcher > Static {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    LaneWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    class TitleChanged(Message):
        """Posted when the lane title is edited."""

        def __init__(self, lane_id: str, title: str) -> None:
            super().__init__()
            self.lane_id = lane_id
            self.title = title

    class DeleteRequested(Message):
        """Posted when the lane should be deleted."""

        def __init__(self, lane_id: str) -> None:
            super().__init__()
            self.lane_id = lane_id

    class CardMoved(Message):
        """Posted when a card is dropped or moved with the keyboard."""

        def __init__(self, result: DragResult) -> None:
            super().__init__()
            self.result = result

    def __init__(self, lane: Lane):
        Vertical.__init__(self)
        self.lane = lane
        self._card_placeholder: CardPlaceholder | None = None

    @property
    def lane_id(self) -> str:
        return self.lane.id

    def compose(self) -> ComposeResult:
        with Horizontal(classes="lane-header"):
            yield EditableText(self.lane.title, Static(self.lane.title), TextEditor(), placeholder="(untitled)")
            yield DeleteButton(id="delete-lane")
        yield Rule()
        for card in self.lane.cards:
            yield CardWidget(card, self.lane.id)
        yield LaneEnd()

    def card_widgets(self) -> list[CardWidget]:
        """Card widgets in display order."""
        return [c for c in self.children if isinstance(c, CardWidget)]

    def update_lane(self, lane: Lane) -> None:
        """Sync title and card children to match lane."""
        self.lane = lane
        self.query_one(EditableText).set_value_quietly(lane.title)

        existing = {c.card_id: c for c in self.card_widgets()}
        wanted = {card.id for card in lane.cards}

        for card_id, widget in existing.items():
            if card_id not in wanted:
                widget.remove()

        end = self.query_one(LaneEnd)
        for card in lane.cards:
            widget = existing.get(card.id)
            if widget is None:
                widget = CardWidget(card, lane.id)
                self.mount(widget, before=end)
                existing[card.id] = widget
            else:
                widget.update_card(card, lane.id)

        insert_before = end
        for card in reversed(lane.cards):
            self.move_child(existing[card.id], before=insert_before)
            insert_before = existing[card.id]

    # -- DropTarget: lane accepting card drops --

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        insert_before = self._calculate_card_insert_position(draggable, y)
        self._ensure_card_placeholder(insert_before)
        return True

    def drag_away(self, draggable) -> None:
        if self._card_placeholder and self._card_placeholder.parent is not None:
            self._card_placeholder.remove()
        self._card_placeholder = None

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        insert_before = self._calculate_card_insert_position(draggable, y)
        index = self._calculate_card_model_position(draggable, insert_before)

        self.drag_away(draggable)
        self.post_message(self.CardMoved(DragResult(source_location(draggable), Location(self.lane_id, index))))
        return True

    def _calculate_card_insert_position(self, draggable, screen_y: int) -> Static:
        for card in self.card_widgets():
            if card is draggable:
                continue
            card_mid_y = card.region.y + card.region.height // 2
            if screen_y < card_mid_y:
                return card
        return self.query_one(LaneEnd)

    def _ensure_card_placeholder(self, insert_before: Static) -> None:
        if self._card_placeholder is None or self._card_placeholder.parent is not self:
            self._card_placeholder = CardPlaceholder()
            self.mount(self._card_placeholder, before=insert_before)
            return

        children = list(self.children)
        if children.index(self._card_placeholder) + 1 != children.index(insert_before):
            self.move_child(self._card_placeholder, before=insert_before)

    def _calculate_card_model_position(self, draggable, insert_before: Static) -> int:
        pos = 0
        for c in self.children:
            if c is insert_before:
                break
            if isinstance(c, CardWidget) and c is not draggable:
                pos += 1
        return pos

    # -- Keyboard and editing --

    def on_editable_text_changed(self, event: EditableText.Changed) -> None:
        """Update lane title when header is edited."""
        event.stop()
        self.post_message(self.TitleChanged(self.lane_id, event.new_value))

    def on_delete_button_pressed(self, event: DeleteButton.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self.lane_id))

    def on_key(self, event) -> None:
        """Arrow key navigation and shift+arrow card movement."""
        if event.key not in ("up", "down", "left", "right", "shift+up", "shift+down", "shift+left", "shift+right"):
            return

        focused = self.screen.focused
        cards = self.card_widgets()
        if focused not in cards:
            return

        idx = cards.index(focused)

        if event.key == "up" and idx > 0:
            cards[idx - 1].focus()
        elif event.key == "down" and idx < len(cards) - 1:
            cards[idx + 1].focus()
        elif event.key in ("left", "right"):
            target = self._neighbour(-1 if event.key == "left" else 1)
            if target is not None and target.card_widgets():
                target_cards = target.card_widgets()
                target_cards[min(idx, len(target_cards) - 1)].focus()
        elif event.key in ("shift+up", "shift+down"):
            new_idx = idx + (-1 if event.key == "shift+up" else 1)
            if 0 <= new_idx < len(cards):
                result = DragResult(Location(self.lane_id, idx), Location(self.lane_id, new_idx))
                self.post_message(self.CardMoved(result))
        elif event.key in ("shift+left", "shift+right"):
            target = self._neighbour(-1 if event.key == "shift+left" else 1)
            if target is not None:
                new_idx = min(idx, len(target.lane.cards))
                result = DragResult(Location(self.lane_id, idx), Location(target.lane_id, new_idx))
                self.post_message(self.CardMoved(result))

        event.prevent_default()
        event.stop()

    def _neighbour(self, direction: int) -> "LaneWidget | None":
        siblings = [w for w in self.parent.children if isinstance(w, LaneWidget)]
        new_idx = siblings.index(self) + direction
        if 0 <= new_idx < len(siblings):
            return siblings[new_idx]
        return None


def source_location(card: CardWidget) -> Location:
    """Where a card widget sits in its lane's model. Index -1 if it isn't there any more."""
    lane = card.parent
    index = -1
    if isinstance(lane, LaneWidget):
        index = next((i for i, c in enumerate(lane.lane.cards) if c.id == card.card_id), -1)
    return Location(card.lane_id, index)
