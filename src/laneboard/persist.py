"""Debounced write-through of board state to local storage."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from laneboard.model.state import BoardState
from laneboard.models import Board
from laneboard.storage import FileStorage
from laneboard.transfer import decode_board, encode_board

logger = logging.getLogger(__name__)

STORAGE_KEY = "data"
SAVE_DELAY = 5.0


def save_board(storage: FileStorage, board: Board, key: str = STORAGE_KEY) -> None:
    """Write the whole board to storage now."""
    storage.set(key, encode_board(board))
    logger.debug("saved %d lanes to %s", len(board), storage.path_for(key))


class PersistenceBridge:
    """Saves the board a quiet period after the last change.

    Each change cancels the pending save and schedules a new one, so a
    burst of edits produces a single write of the final board. At most one
    save is pending at any time. The timer lives on the running asyncio
    loop, so ``attach`` and any state change must happen inside it.
    """

    def __init__(
        self,
        state: BoardState,
        storage: FileStorage,
        key: str = STORAGE_KEY,
        delay: float = SAVE_DELAY,
    ) -> None:
        self.state = state
        self.storage = storage
        self.key = key
        self.delay = delay
        self._pending: asyncio.TimerHandle | None = None
        self._unwatch: Callable[[], None] | None = None
        self.rejected = False

    @property
    def pending(self) -> bool:
        """True while a save is scheduled."""
        return self._pending is not None

    def restore(self) -> bool:
        """Replace the board with the stored one. False if nothing valid was stored.

        A record that exists but fails validation sets ``rejected``.
        """
        text = self.storage.get(self.key)
        if text is None:
            return False
        board = decode_board(text)
        if board is None:
            self.rejected = True
            return False
        self.state.replace(board)
        logger.info("restored %d lanes from %s", len(board), self.storage.path_for(self.key))
        return True

    def attach(self) -> None:
        """Start saving on every board change."""
        if self._unwatch is None:
            self._unwatch = self.state.watch(self._on_board_changed)

    def _on_board_changed(self, old: Board, new: Board) -> None:
        self.schedule()

    def schedule(self) -> None:
        """Cancel any pending save and schedule a fresh one."""
        self._cancel()
        loop = asyncio.get_running_loop()
        self._pending = loop.call_later(self.delay, self._save)

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _save(self) -> None:
        self._pending = None
        try:
            save_board(self.storage, self.state.board, self.key)
        except OSError:
            logger.exception("save failed")

    def save_now(self) -> None:
        """Cancel any pending save and write the board immediately."""
        self._cancel()
        self._save()

    def flush(self) -> bool:
        """Run the pending save now. Returns False if nothing was pending."""
        if self._pending is None:
            return False
        self.save_now()
        return True

    def close(self) -> None:
        """Drop any pending save and stop watching the state."""
        self._cancel()
        if self._unwatch is not None:
            self._unwatch()
            self._unwatch = None
