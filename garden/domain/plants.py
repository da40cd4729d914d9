"""Domain helpers for plants: watering status, input validation and the record codec."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Mapping

from garden.core.utils import format_timestamp, parse_timestamp


# Ten years; keeps every next watering day well inside the date range
MAX_FREQUENCY = 3650


class WateringStatus(str, Enum):
    DUE = "DUE"
    TODAY = "TODAY"
    UPCOMING = "UPCOMING"


@dataclass(frozen=True)
class Plant:
    id: int
    name: str
    frequency: int
    last_watered: datetime


def truncate_to_day(value: date | datetime) -> date:
    """
    Drop the time-of-day component and return the local calendar day.

    Aware datetimes are converted to the local zone first so that a timestamp
    recorded in UTC lands on the same day the user saw on their wall clock.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def next_watering_date(plant: Plant) -> date:
    """Calendar day of the next watering; day arithmetic, so DST shifts never move it."""
    return truncate_to_day(plant.last_watered) + timedelta(days=plant.frequency)


def days_until_watering(plant: Plant, reference: date | datetime) -> int:
    """Whole days from the reference day to the next watering day (negative when overdue)."""
    return (next_watering_date(plant) - truncate_to_day(reference)).days


def status_of(plant: Plant, reference: date | datetime) -> WateringStatus:
    """Classify a plant against the reference day. Both sides are truncated to the day."""
    due_day = next_watering_date(plant)
    today = truncate_to_day(reference)
    if due_day < today:
        return WateringStatus.DUE
    if due_day == today:
        return WateringStatus.TODAY
    return WateringStatus.UPCOMING


def normalize_name(value: str | None) -> str:
    return (value or "").strip()


def clamp_frequency(value: Any, default: int = 3) -> int:
    """Turn raw form/CLI input into a usable frequency (never below 1)."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        number = default
    return max(1, number)


def is_valid_plant_input(name: str | None, frequency: Any) -> bool:
    if not normalize_name(name):
        return False
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        return False
    return 1 <= frequency <= MAX_FREQUENCY


# -------------------------- persisted records --------------------------
def plant_to_record(plant: Plant) -> dict:
    return {
        "id": plant.id,
        "name": plant.name,
        "frequency": plant.frequency,
        "lastWatered": format_timestamp(plant.last_watered),
    }


def plant_from_record(record: Mapping[str, Any]) -> Plant:
    """Build a Plant from a stored record; raise ValueError when anything is off."""
    if not isinstance(record, Mapping):
        raise ValueError(f"Plant record must be an object, got {type(record).__name__}")
    try:
        plant_id = record["id"]
        name = record["name"]
        frequency = record["frequency"]
        last_watered = record["lastWatered"]
    except KeyError as exc:
        raise ValueError(f"Plant record missing field {exc.args[0]!r}") from exc
    if isinstance(plant_id, bool) or not isinstance(plant_id, int):
        raise ValueError(f"Invalid plant id: {plant_id!r}")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Invalid plant name for id {plant_id}")
    if not is_valid_plant_input(name, frequency):
        raise ValueError(f"Invalid frequency for plant {plant_id}: {frequency!r}")
    try:
        plant = Plant(
            id=plant_id,
            name=name.strip(),
            frequency=frequency,
            last_watered=parse_timestamp(last_watered),
        )
        next_watering_date(plant)
    except OverflowError as exc:
        raise ValueError(f"Next watering date out of range for plant {plant_id}") from exc
    return plant
