"""
JSON file persistence adapter.

The file holds one JSON object mapping keys to string values, the same shape
the browser's localStorage had, so one file can serve several keys.
"""

from __future__ import annotations

from pathlib import Path
import json
import os
import tempfile

from garden.repositories.kv_store import StorageError


class JsonFileStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Unexpected content in {self.path}: expected a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Registros antigos podem ter sido gravados como JSON puro
            return json.dumps(value, ensure_ascii=False)
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # temporario unico por escrita: gravacoes concorrentes nao se sobrescrevem
            fd, tmp_name = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc
