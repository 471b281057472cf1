"""Board state container with change notification."""

from __future__ import annotations

from typing import Any, Callable

from laneboard.models import Board

Callback = Callable[[Board, Board], None]


class BoardState:
    """Holds the current board and tells watchers when it changes.

    The board itself is immutable. Operations take the current board and
    return a new one, which replaces it here. Replacing with an equal
    board is not a change and fires nothing.
    """

    def __init__(self, board: Board = ()) -> None:
        self._board: Board = tuple(board)
        self._watchers: list[Callback] = []
        self._version = 0

    @property
    def board(self) -> Board:
        return self._board

    @property
    def version(self) -> int:
        """Incremented on every change."""
        return self._version

    def replace(self, board: Board) -> bool:
        """Swap in a new board. Returns True if it differed from the old one."""
        old = self._board
        board = tuple(board)
        if board == old:
            return False
        self._board = board
        self._version += 1
        for cb in list(self._watchers):
            cb(old, board)
        return True

    def apply(self, operation: Callable[..., Board], *args: Any) -> Board:
        """Run ``operation(board, *args)`` and store the result."""
        self.replace(operation(self._board, *args))
        return self._board

    def watch(self, callback: Callback) -> Callable[[], None]:
        """Watch for board changes. Returns an unwatch callable."""
        self._watchers.append(callback)
        return lambda: callback in self._watchers and self._watchers.remove(callback)

    def __repr__(self) -> str:
        ids = ", ".join(lane.id for lane in self._board)
        return f"<BoardState v{self._version} [{ids}]>"
