"""Key-value store backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from garden.db.models import Base, KeyValue
from garden.db.session import get_engine, get_session
from garden.repositories.kv_store import StorageError


class SQLKeyValueStore:
    """One row per key in the kv_store table; the schema is created on first use."""

    def __init__(self) -> None:
        # falha cedo quando DATABASE_URL nao esta configurada
        get_engine()
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        Base.metadata.create_all(bind=get_engine(), tables=[KeyValue.__table__])
        self._schema_ready = True

    def get(self, key: str) -> str | None:
        try:
            self._ensure_schema()
            with get_session() as session:
                entry = session.get(KeyValue, key)
                return entry.value if entry else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read key {key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            self._ensure_schema()
            with get_session() as session:
                entry = session.get(KeyValue, key)
                if not entry:
                    session.add(KeyValue(key=key, value=value, updated_at=now))
                else:
                    entry.value = value
                    entry.updated_at = now
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to write key {key!r}: {exc}") from exc
