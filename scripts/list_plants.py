#!/usr/bin/env python3
"""
Listar as plantas com o status de rega de hoje.

Uso:
  python scripts/list_plants.py [--json]
"""
from __future__ import annotations

import argparse
import json
import sys

from _common import open_registry
from garden.services.plant_display import build_plant_card, card_to_dict


def main() -> None:
    ap = argparse.ArgumentParser(description="Listar plantas")
    ap.add_argument("--json", action="store_true", help="Saida em JSON")
    args = ap.parse_args()

    registry = open_registry()
    reference = registry.now()
    cards = [build_plant_card(plant, reference) for plant in registry.list()]
    if args.json:
        print(json.dumps([card_to_dict(card) for card in cards], ensure_ascii=False, indent=2))
        return
    if not cards:
        print("Nenhuma planta cadastrada.")
        return
    for card in cards:
        print(f"{card.status.value:<9} {card.id}  {card.name}  ({card.frequency_label.lower()}, next {card.next_watering})")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
