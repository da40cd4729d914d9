#!/usr/bin/env python3
"""
Remover uma planta do armazenamento configurado.

Uso:
  python scripts/delete_plant.py --id 1729250000000
"""
from __future__ import annotations

import argparse
import sys

from _common import open_registry


def main() -> None:
    ap = argparse.ArgumentParser(description="Remover planta")
    ap.add_argument("--id", required=True, type=int, help="ID da planta a remover")
    args = ap.parse_args()

    registry = open_registry()
    if not registry.delete(args.id):
        raise SystemExit(f"Planta '{args.id}' nao encontrada")
    print(f"OK: planta {args.id} removida")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
