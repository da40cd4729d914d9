#!/usr/bin/env python3
"""
Cadastrar uma nova planta no armazenamento configurado (GARDEN_STORAGE).

Uso:
  python scripts/add_plant.py --name Basil [--frequency 3]
"""
from __future__ import annotations

import argparse
import sys

from _common import open_registry
from garden.core.config import get_settings
from garden.domain.plants import clamp_frequency, normalize_name


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar planta")
    ap.add_argument("--name", required=True, help="Nome da planta (ex.: Basil)")
    ap.add_argument("--frequency", help="Intervalo de rega em dias (default: GARDEN_DEFAULT_FREQUENCY)")
    args = ap.parse_args()

    name = normalize_name(args.name)
    if not name:
        raise SystemExit("Nome invalido")
    default = get_settings().default_frequency
    frequency = clamp_frequency(args.frequency, default) if args.frequency else default

    registry = open_registry()
    plant = registry.create(name, frequency)
    if plant is None:
        raise SystemExit("Planta nao cadastrada")
    print("OK: planta cadastrada")
    print(f"  ID: {plant.id}")
    print(f"  Nome: {plant.name}")
    print(f"  Frequencia: {plant.frequency} dia(s)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
