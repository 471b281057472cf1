"""Tests for configuration loading."""

import pytest

from laneboard.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LANEBOARD_CONFIG", raising=False)
    monkeypatch.delenv("LANEBOARD_DATA_DIR", raising=False)


def test_defaults(tmp_path):
    cfg = Config.load(tmp_path / "missing.yaml")
    assert cfg == Config()
    assert cfg.storage_key == "data"
    assert cfg.save_delay == 5.0
    assert cfg.export_filename == "data.json"


def test_load_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("data_dir: /srv/boards\nsave_delay: 1.5\nstorage_key: work\n")
    cfg = Config.load(path)
    assert cfg.data_dir == "/srv/boards"
    assert cfg.save_delay == 1.5
    assert cfg.storage_key == "work"
    assert cfg.export_dir == "."


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("theme: dark\nexport_dir: /tmp\n")
    assert Config.load(path).export_dir == "/tmp"


@pytest.mark.parametrize("text", ["- a\n- b\n", "data_dir: [unclosed\n"])
def test_bad_file_falls_back(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    assert Config.load(path) == Config()


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert Config.load(path) == Config()


def test_config_env_var(tmp_path, monkeypatch):
    path = tmp_path / "alt.yaml"
    path.write_text("storage_key: alt\n")
    monkeypatch.setenv("LANEBOARD_CONFIG", str(path))
    assert Config.load().storage_key == "alt"


def test_data_dir_env_beats_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("data_dir: /from/file\n")
    monkeypatch.setenv("LANEBOARD_DATA_DIR", str(tmp_path / "env"))
    assert Config.load(path).data_dir == str(tmp_path / "env")


def test_override_skips_none():
    cfg = Config().override(data_dir="/x", export_dir=None)
    assert cfg.data_dir == "/x"
    assert cfg.export_dir == "."


def test_storage_uses_data_path(tmp_path):
    cfg = Config(data_dir=str(tmp_path))
    assert cfg.storage().path_for("data") == tmp_path / "data.json"
