"""Helpers shared by the maintenance scripts."""
from __future__ import annotations

import sys
from pathlib import Path

# Garante que o pacote garden seja importável ao rodar os scripts direto do repo
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from garden.app_factory import build_registry  # noqa: E402
from garden.core.config import get_settings  # noqa: E402
from garden.core.logging import configure_logging  # noqa: E402
from garden.services.plant_registry import PlantRegistry  # noqa: E402


def open_registry() -> PlantRegistry:
    settings = get_settings()
    configure_logging(settings.log_level)
    return build_registry(settings)
