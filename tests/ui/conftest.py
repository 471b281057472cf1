"""Fixtures for UI tests."""

import pytest

from laneboard.config import Config
from laneboard.models import Card, Lane
from laneboard.persist import save_board
from laneboard.storage import FileStorage

SIZE = (120, 40)


@pytest.fixture
def config(tmp_path):
    """Config pointing at an empty data directory, with a save delay long enough never to fire."""
    return Config(data_dir=str(tmp_path / "data"), save_delay=60, export_dir=str(tmp_path))


@pytest.fixture
def seeded(config):
    """Store a board with two lanes; the first holds two cards."""
    board = (
        Lane("lane-1", "Todo", (Card("card-1", "First", "one"), Card("card-2", "Second", ""))),
        Lane("lane-2", "Done", ()),
    )
    save_board(FileStorage(config.data_path), board)
    return board
