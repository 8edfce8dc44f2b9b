"""Local JSON file key/value backend."""

import asyncio
from dataclasses import dataclass
from pathlib import Path

from sugar_tracker.services.storage import KeyValueBackend


@dataclass
class JsonFileKeyValueBackend(KeyValueBackend):
    """Stores each key as a JSON file under a root directory.

    ``sugar/entries`` maps to ``<root>/sugar/entries.json``. Writes go to a
    temporary file that is then renamed over the target.
    """

    root: Path

    async def get_item(self, key: str) -> str | None:
        """Return file contents for a key, if the file exists."""
        return await asyncio.to_thread(self._read, self._path(key))

    async def set_item(self, key: str, value: str) -> None:
        """Atomically replace the file for a key."""
        await asyncio.to_thread(self._write, self._path(key), value)

    async def remove_item(self, key: str) -> None:
        """Delete the file for a key."""
        await asyncio.to_thread(self._path(key).unlink, missing_ok=True)

    def _path(self, key: str) -> Path:
        parts = [part for part in key.split("/") if part not in {"", ".", ".."}]
        if not parts:
            raise ValueError(f"Invalid storage key: {key!r}")
        *folders, name = parts
        return self.root.joinpath(*folders) / f"{name}.json"

    @staticmethod
    def _read(path: Path) -> str | None:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    @staticmethod
    def _write(path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f"{path.name}.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)
