"""
Smoke tests for the maintenance scripts against a temporary JSON data file.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote garden e os scripts sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from garden.core import config as core_config  # noqa: E402
import add_plant  # noqa: E402
import delete_plant  # noqa: E402
import list_plants  # noqa: E402
import water_plant  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    path = tmp_path / "data.json"
    monkeypatch.setenv("GARDEN_STORAGE", "json")
    monkeypatch.setenv("GARDEN_DATA_FILE", str(path))
    monkeypatch.setenv("GARDEN_LOG_LEVEL", "WARNING")
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()


def _run(monkeypatch, module, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", [f"{module.__name__}.py", *args])
    module.main()


def _listed(monkeypatch, capsys) -> list[dict]:
    capsys.readouterr()
    _run(monkeypatch, list_plants, "--json")
    return json.loads(capsys.readouterr().out)


def test_add_water_list_delete_flow(data_file, monkeypatch, capsys):
    _run(monkeypatch, add_plant, "--name", "  Basil ", "--frequency", "2")
    out = capsys.readouterr().out
    assert "OK: planta cadastrada" in out
    assert "Nome: Basil" in out
    assert data_file.exists()

    [card] = _listed(monkeypatch, capsys)
    assert card["name"] == "Basil"
    assert card["frequency"] == 2
    assert card["status"] == "UPCOMING"

    _run(monkeypatch, water_plant, "--id", str(card["id"]))
    assert "OK: Basil regada" in capsys.readouterr().out

    _run(monkeypatch, delete_plant, "--id", str(card["id"]))
    assert "removida" in capsys.readouterr().out
    assert _listed(monkeypatch, capsys) == []

    with pytest.raises(SystemExit):
        _run(monkeypatch, delete_plant, "--id", str(card["id"]))


def test_add_plant_clamps_frequency(data_file, monkeypatch, capsys):
    _run(monkeypatch, add_plant, "--name", "Fern", "--frequency", "0")
    [card] = _listed(monkeypatch, capsys)
    assert card["frequency"] == 1


def test_add_plant_rejects_blank_name(data_file, monkeypatch):
    with pytest.raises(SystemExit):
        _run(monkeypatch, add_plant, "--name", "   ")
    assert not data_file.exists()


def test_list_plants_without_plants(data_file, monkeypatch, capsys):
    _run(monkeypatch, list_plants)
    assert "Nenhuma planta cadastrada." in capsys.readouterr().out
