"""Helpers for rendering plant cards (status badge, labels, dates)."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime

from garden.domain.plants import (
    Plant,
    WateringStatus,
    days_until_watering,
    next_watering_date,
    status_of,
    truncate_to_day,
)

BADGE_CLASSES = {
    WateringStatus.DUE: ("bg-red", "text-white"),
    WateringStatus.TODAY: ("bg-yellow", "text-black"),
    WateringStatus.UPCOMING: ("bg-green", "text-white"),
}


@dataclass
class PlantCard:
    id: int
    name: str
    frequency: int
    frequency_label: str
    last_watered: date
    next_watering: date
    status: WateringStatus
    badge_class: str
    text_class: str
    days_until: int


def frequency_label(frequency: int) -> str:
    return f"Every {frequency} day{'s' if frequency > 1 else ''}"


def build_plant_card(plant: Plant, reference: date | datetime) -> PlantCard:
    status = status_of(plant, reference)
    badge_class, text_class = BADGE_CLASSES[status]
    return PlantCard(
        id=plant.id,
        name=plant.name,
        frequency=plant.frequency,
        frequency_label=frequency_label(plant.frequency),
        last_watered=truncate_to_day(plant.last_watered),
        next_watering=next_watering_date(plant),
        status=status,
        badge_class=badge_class,
        text_class=text_class,
        days_until=days_until_watering(plant, reference),
    )


def card_to_dict(card: PlantCard) -> dict:
    data = asdict(card)
    data["status"] = card.status.value
    data["last_watered"] = card.last_watered.isoformat()
    data["next_watering"] = card.next_watering.isoformat()
    return data


def status_counts(cards: list[PlantCard]) -> dict[str, int]:
    counts = {status.value: 0 for status in WateringStatus}
    for card in cards:
        counts[card.status.value] += 1
    return counts
