"""Runtime configuration.

Defaults can be overridden by a YAML file, then by environment
variables, then by command line flags.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from laneboard.persist import SAVE_DELAY, STORAGE_KEY
from laneboard.storage import FileStorage
from laneboard.transfer import EXPORT_FILENAME

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("~/.config/laneboard/config.yaml")
DATA_DIR = "~/.local/share/laneboard"

ENV_CONFIG = "LANEBOARD_CONFIG"
ENV_DATA_DIR = "LANEBOARD_DATA_DIR"


@dataclass(frozen=True)
class Config:
    """Where the board is stored and how it is saved and exported."""

    data_dir: str = DATA_DIR
    storage_key: str = STORAGE_KEY
    save_delay: float = SAVE_DELAY
    export_dir: str = "."
    export_filename: str = EXPORT_FILENAME

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load from a YAML file and the environment, falling back to defaults."""
        if path is None:
            path = os.environ.get(ENV_CONFIG) or CONFIG_PATH
        cfg = cls._from_file(Path(path).expanduser())
        data_dir = os.environ.get(ENV_DATA_DIR)
        if data_dir:
            cfg = replace(cfg, data_dir=data_dir)
        return cfg

    @classmethod
    def _from_file(cls, path: Path) -> Config:
        if not path.exists():
            return cls()
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("ignoring config %s: %s", path, exc)
            return cls()
        if not isinstance(data, dict):
            logger.warning("ignoring config %s: not a mapping", path)
            return cls()
        known = {f.name for f in fields(cls)}
        try:
            return cls(**{k: v for k, v in data.items() if k in known})
        except TypeError as exc:
            logger.warning("ignoring config %s: %s", path, exc)
            return cls()

    def override(self, **changes) -> Config:
        """Return a copy with the non-None changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()

    def storage(self) -> FileStorage:
        """Storage backend for the configured data directory."""
        return FileStorage(self.data_path)
