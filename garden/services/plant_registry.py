"""Plant registry: owns the in-memory collection and its create/water/delete use cases."""
from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterator, Sequence

from garden.core.utils import local_now
from garden.domain.plants import (
    Plant,
    WateringStatus,
    is_valid_plant_input,
    normalize_name,
    status_of,
)
from garden.repositories.plant_storage import PlantStorage

logger = logging.getLogger(__name__)

Listener = Callable[[Sequence[Plant]], None]


class PlantRegistry:
    """
    Newest-first collection of plants for one session.

    When a PlantStorage is given the registry loads from it once and saves the
    full collection after every mutation through a change listener. A lock
    serializes operations (and their saves) across FastAPI's worker threads.
    """

    def __init__(
        self,
        storage: PlantStorage | None = None,
        *,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self.storage = storage
        self._clock = clock
        self._plants: list[Plant] = []
        self._listeners: list[Listener] = []
        self._last_id = 0
        self._lock = threading.RLock()
        if storage is not None:
            self.reload()
            self.add_listener(storage.save)

    # -------------------------------------- helpers --------------------------------------
    def now(self) -> datetime:
        return self._clock()

    def add_listener(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def _notify(self) -> None:
        snapshot = list(self._plants)
        for listener in self._listeners:
            listener(snapshot)

    def _next_id(self, now: datetime) -> int:
        # Ids seguem o relogio (ms) mas nunca repetem, mesmo com cliques duplos
        candidate = max(int(now.timestamp() * 1000), self._last_id + 1)
        self._last_id = candidate
        return candidate

    def _index_of(self, plant_id: int) -> int | None:
        for idx, plant in enumerate(self._plants):
            if plant.id == plant_id:
                return idx
        return None

    def reload(self) -> None:
        """Replace the collection with whatever storage holds (empty when absent or corrupt)."""
        loaded = self.storage.load() if self.storage is not None else None
        with self._lock:
            self._plants = list(loaded or [])
            self._last_id = max([self._last_id] + [p.id for p in self._plants])
        logger.info("Loaded %d plants", len(self._plants))

    # -------------------------------------- use cases --------------------------------------
    def create(self, name: str, frequency: int) -> Plant | None:
        if not is_valid_plant_input(name, frequency):
            logger.debug("Rejected plant input name=%r frequency=%r", name, frequency)
            return None
        with self._lock:
            now = self._clock()
            plant = Plant(id=self._next_id(now), name=normalize_name(name), frequency=frequency, last_watered=now)
            self._plants.insert(0, plant)
            logger.info("Created plant %s (%s, every %d days)", plant.id, plant.name, plant.frequency)
            self._notify()
        return plant

    def mark_watered(self, plant_id: int) -> Plant | None:
        with self._lock:
            idx = self._index_of(plant_id)
            if idx is None:
                return None
            plant = replace(self._plants[idx], last_watered=self._clock())
            self._plants[idx] = plant
            logger.info("Watered plant %s", plant_id)
            self._notify()
        return plant

    def delete(self, plant_id: int) -> bool:
        with self._lock:
            idx = self._index_of(plant_id)
            if idx is None:
                return False
            del self._plants[idx]
            logger.info("Deleted plant %s", plant_id)
            self._notify()
        return True

    def list(self) -> list[Plant]:
        with self._lock:
            return list(self._plants)

    def get(self, plant_id: int) -> Plant | None:
        with self._lock:
            idx = self._index_of(plant_id)
            return self._plants[idx] if idx is not None else None

    def status_of(self, plant: Plant, reference: date | datetime | None = None) -> WateringStatus:
        return status_of(plant, reference if reference is not None else self._clock())

    def statuses(self, reference: date | datetime | None = None) -> list[tuple[Plant, WateringStatus]]:
        ref = reference if reference is not None else self._clock()
        return [(plant, status_of(plant, ref)) for plant in self.list()]

    def __len__(self) -> int:
        return len(self._plants)

    def __iter__(self) -> Iterator[Plant]:
        return iter(self.list())

    def __contains__(self, plant_id: object) -> bool:
        return self.get(plant_id) is not None
