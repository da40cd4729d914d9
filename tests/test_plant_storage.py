"""
Persistence adapter: round-trip, corrupt records and store failures never escape.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Garante que o pacote garden seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from garden.domain.plants import Plant  # noqa: E402
from garden.repositories.kv_store import MemoryStore, StorageError  # noqa: E402
from garden.repositories.plant_storage import PlantStorage  # noqa: E402

TZ = timezone(timedelta(hours=2))


class BrokenStore:
    def get(self, key: str) -> str | None:
        raise StorageError("disk on fire")

    def set(self, key: str, value: str) -> None:
        raise StorageError("disk on fire")


@pytest.fixture()
def plants():
    return [
        Plant(id=3, name="Basil", frequency=2, last_watered=datetime(2024, 5, 10, 7, 45, 12, 500000, tzinfo=TZ)),
        Plant(id=2, name="Fern", frequency=5, last_watered=datetime(2024, 5, 8, 21, 0, tzinfo=TZ)),
        Plant(id=1, name="Basil", frequency=1, last_watered=datetime(2024, 4, 30, 12, 0, tzinfo=TZ)),
    ]


def test_round_trip_preserves_order_and_fields(plants):
    store = MemoryStore()
    storage = PlantStorage(store)

    storage.save(plants)
    loaded = storage.load()
    storage.save(loaded)

    assert loaded == plants
    assert storage.load() == plants


def test_saved_layout_is_plain_json_list(plants):
    store = MemoryStore()
    PlantStorage(store, key="my-plants").save(plants[:1])

    assert store.get("plants") is None
    assert json.loads(store.get("my-plants")) == [
        {"id": 3, "name": "Basil", "frequency": 2, "lastWatered": "2024-05-10T07:45:12.500000+02:00"}
    ]


def test_missing_record_loads_as_none():
    assert PlantStorage(MemoryStore()).load() is None


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "null",
        '{"id": 1}',
        '[{"id": 1, "name": "Basil", "frequency": 0, "lastWatered": "2024-05-10T08:00:00"}]',
        '[{"id": 1, "name": "Basil", "frequency": 2, "lastWatered": "2024-05-10T08:00:00"},'
        ' {"id": 1, "name": "Fern", "frequency": 3, "lastWatered": "2024-05-10T08:00:00"}]',
        "[" * 100000 + "]" * 100000,
        '[{"id": 1, "name": "Cactus", "frequency": 1000000000, "lastWatered": "2024-05-10T08:00:00"}]',
    ],
)
def test_corrupt_record_loads_as_none(raw, caplog):
    storage = PlantStorage(MemoryStore({"plants": raw}))
    with caplog.at_level(logging.WARNING, logger="garden.repositories.plant_storage"):
        assert storage.load() is None
    assert "corrupt" in caplog.text


def test_store_errors_are_logged_not_raised(plants, caplog):
    storage = PlantStorage(BrokenStore())
    with caplog.at_level(logging.ERROR, logger="garden.repositories.plant_storage"):
        assert storage.load() is None
        storage.save(plants)
    assert "Error reading" in caplog.text
    assert "Error saving 3 plants" in caplog.text


def test_empty_collection_round_trips():
    storage = PlantStorage(MemoryStore())
    storage.save([])
    assert storage.load() == []
