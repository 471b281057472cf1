"""Shared fixtures for CLI tests."""

import json

import pytest

from laneboard.models import Card, Lane
from laneboard.persist import save_board
from laneboard.storage import FileStorage


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and environment out of the tests."""
    monkeypatch.setenv("LANEBOARD_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("LANEBOARD_DATA_DIR", raising=False)


@pytest.fixture
def empty_dir(tmp_path):
    """A data directory with nothing stored."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def seeded_dir(empty_dir):
    """A data directory holding a board (3 lanes, 2 cards in the first)."""
    board = (
        Lane(
            "lane-1",
            "Backlog",
            (Card("card-1", "First card", "Description one."), Card("card-2", "Second card", "")),
        ),
        Lane("lane-2", "Doing", ()),
        Lane("lane-3", "Done", ()),
    )
    save_board(FileStorage(empty_dir), board)
    return empty_dir


@pytest.fixture
def stored():
    """Read back the board data stored in a data directory."""

    def read(data_dir):
        return json.loads((data_dir / "data.json").read_text())

    return read
