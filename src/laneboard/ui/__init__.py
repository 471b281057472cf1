"""Textual UI for laneboard."""

from laneboard.ui.app import LaneboardApp

__all__ = ["LaneboardApp"]
