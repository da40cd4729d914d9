from __future__ import annotations

from datetime import date, datetime
import sys
from pathlib import Path

# Garante que o pacote garden seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from garden.domain.plants import Plant, WateringStatus  # noqa: E402
from garden.services.plant_display import (  # noqa: E402
    build_plant_card,
    card_to_dict,
    frequency_label,
    status_counts,
)

NOW = datetime(2024, 5, 10, 18, 0)


def test_frequency_label_pluralizes():
    assert frequency_label(1) == "Every 1 day"
    assert frequency_label(3) == "Every 3 days"


def test_card_for_overdue_plant():
    plant = Plant(id=7, name="Fern", frequency=2, last_watered=datetime(2024, 5, 6, 9, 0))
    card = build_plant_card(plant, NOW)

    assert card.status is WateringStatus.DUE
    assert (card.badge_class, card.text_class) == ("bg-red", "text-white")
    assert card.last_watered == date(2024, 5, 6)
    assert card.next_watering == date(2024, 5, 8)
    assert card.days_until == -2


def test_card_to_dict_is_json_friendly():
    plant = Plant(id=7, name="Basil", frequency=1, last_watered=datetime(2024, 5, 9, 7, 0))
    data = card_to_dict(build_plant_card(plant, NOW))

    assert data == {
        "id": 7,
        "name": "Basil",
        "frequency": 1,
        "frequency_label": "Every 1 day",
        "last_watered": "2024-05-09",
        "next_watering": "2024-05-10",
        "status": "TODAY",
        "badge_class": "bg-yellow",
        "text_class": "text-black",
        "days_until": 0,
    }


def test_status_counts_includes_every_status():
    plant = Plant(id=1, name="Basil", frequency=5, last_watered=NOW)
    counts = status_counts([build_plant_card(plant, NOW)])
    assert counts == {"DUE": 0, "TODAY": 0, "UPCOMING": 1}
