#!/usr/bin/env python3
"""
Marcar uma planta como regada agora.

Uso:
  python scripts/water_plant.py --id 1729250000000
"""
from __future__ import annotations

import argparse
import sys

from _common import open_registry


def main() -> None:
    ap = argparse.ArgumentParser(description="Marcar planta como regada")
    ap.add_argument("--id", required=True, type=int, help="ID da planta")
    args = ap.parse_args()

    registry = open_registry()
    plant = registry.mark_watered(args.id)
    if plant is None:
        raise SystemExit(f"Planta '{args.id}' nao encontrada")
    print(f"OK: {plant.name} regada em {plant.last_watered:%Y-%m-%d %H:%M}")
    print(f"  Status: {registry.status_of(plant).value}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
