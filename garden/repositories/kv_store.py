"""Key-value store contract plus the in-memory implementations and the backend picker."""
from __future__ import annotations

from typing import Protocol

from garden.core.config import Settings


class StorageError(Exception):
    """Raised by a store when the underlying medium cannot be read or written."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Dict-backed store, lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class NullStore:
    """Never holds anything; for registries that should not persist."""

    def get(self, key: str) -> str | None:
        return None

    def set(self, key: str, value: str) -> None:
        return None


def open_store(settings: Settings) -> KeyValueStore:
    backend = settings.storage_backend
    if backend == "json":
        from garden.repositories.json_storage import JsonFileStore

        return JsonFileStore(settings.data_file)
    if backend == "sql":
        from garden.repositories.sql_repository import SQLKeyValueStore

        return SQLKeyValueStore()
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown storage backend: {backend!r} (use json, sql or memory)")
