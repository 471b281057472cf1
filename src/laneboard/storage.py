"""Local key/value storage for persisted boards."""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorage:
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temp file in the same directory and are renamed into
    place, so a reader never sees a half-written record.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the stored text for key, or None if missing or unreadable."""
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("cannot read %s: %s", path, exc)
            return None

    def set(self, key: str, value: str) -> None:
        """Write value for key."""
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, self.path_for(key))
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        """Remove the record for key if present."""
        self.path_for(key).unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"<FileStorage {self.directory}>"
