"""
Persistence adapter for the plant collection.

The whole collection is serialized as one JSON list under a fixed key. Neither
operation raises: failures are logged and degrade to "nothing loaded" or
"write dropped", leaving the in-memory state authoritative.
"""
from __future__ import annotations

import json
import logging
from typing import Sequence

from garden.domain.plants import Plant, plant_from_record, plant_to_record
from garden.repositories.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "plants"


def encode_plants(plants: Sequence[Plant]) -> str:
    return json.dumps([plant_to_record(p) for p in plants], ensure_ascii=False)


def decode_plants(raw: str) -> list[Plant]:
    """Parse a stored collection; raise ValueError when the record is corrupt."""
    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of plants, got {type(payload).__name__}")
    plants = [plant_from_record(item) for item in payload]
    ids = [p.id for p in plants]
    if len(ids) != len(set(ids)):
        raise ValueError("Duplicate plant ids in stored collection")
    return plants


class PlantStorage:
    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> list[Plant] | None:
        try:
            raw = self.store.get(self.key)
        except Exception:
            logger.error("Error reading %r from storage", self.key, exc_info=True)
            return None
        if raw is None:
            return None
        try:
            return decode_plants(raw)
        except Exception as exc:
            logger.warning("Ignoring corrupt plant record under %r: %s", self.key, exc, exc_info=True)
            return None

    def save(self, plants: Sequence[Plant]) -> None:
        try:
            self.store.set(self.key, encode_plants(plants))
        except Exception:
            logger.error("Error saving %d plants under %r", len(plants), self.key, exc_info=True)
