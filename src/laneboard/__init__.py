"""Terminal kanban board with lanes, cards and drag-and-drop."""

__version__ = "0.1.0"
