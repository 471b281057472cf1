"""Mixin that ties BoardState watches to a widget's lifetime."""

from __future__ import annotations

from typing import Callable

from laneboard.model.state import BoardState, Callback


class StateWatcherMixin:
    """Watches registered through ``state_watch`` are dropped on unmount.

    Call ``_init_watcher()`` before ``super().__init__()``. A subclass that
    defines its own ``on_unmount`` must call this one.
    """

    def _init_watcher(self) -> None:
        self._unwatchers: list[Callable[[], None]] = []

    def state_watch(self, state: BoardState, callback: Callback) -> None:
        self._unwatchers.append(state.watch(callback))

    def on_unmount(self) -> None:
        while self._unwatchers:
            self._unwatchers.pop()()
