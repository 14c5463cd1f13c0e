"""File-backed key-value store."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from water_tracker.services.storage import KeyValueStore


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores each key as its own JSON document inside a directory."""

    directory: Path

    @classmethod
    def create(cls, directory: Path | str) -> "JsonFileKeyValueStore":
        """Create a store, making the directory if needed."""
        path = Path(directory).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return cls(directory=path)

    def get(self, key: str) -> str | None:
        """Return the document stored for a key."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8", errors="replace")

    def set(self, key: str, value: str) -> None:
        """Replace the document for a key in one rename."""
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{path.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        """Remove the document for a key."""
        self._path(key).unlink(missing_ok=True)

    def _path(self, key: str) -> Path:
        safe_name = key.replace("/", "_").replace(os.sep, "_")
        return self.directory / f"{safe_name}.json"
