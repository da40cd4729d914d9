"""Plant routes: the HTML page, the JSON listing and the add/water/delete form posts."""
from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from garden.core.config import Settings
from garden.domain.plants import clamp_frequency
from garden.services.plant_display import build_plant_card, card_to_dict, status_counts
from garden.services.plant_registry import PlantRegistry

router = APIRouter(tags=["plants"])


def _get_registry(request: Request) -> PlantRegistry:
    registry = getattr(getattr(request.app, "state", None), "plant_registry", None)
    if registry is None:
        raise RuntimeError("PlantRegistry nao configurado")
    return registry


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates nao configurados")


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _back_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


def _cards(registry: PlantRegistry):
    reference = registry.now()
    return [build_plant_card(plant, reference) for plant in registry.list()]


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    registry = _get_registry(request)
    templates = _get_templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "cards": _cards(registry),
            "default_frequency": _get_settings(request).default_frequency,
        },
    )


@router.get("/plants")
def list_plants(request: Request):
    cards = _cards(_get_registry(request))
    return {"plants": [card_to_dict(card) for card in cards], "counts": status_counts(cards)}


@router.post("/plants")
def create_plant(request: Request, name: str = Form(""), frequency: str = Form("")):
    registry = _get_registry(request)
    default = _get_settings(request).default_frequency
    registry.create(name, clamp_frequency(frequency, default) if frequency.strip() else default)
    return _back_home()


@router.post("/plants/{plant_id}/water")
def water_plant(plant_id: int, request: Request):
    _get_registry(request).mark_watered(plant_id)
    return _back_home()


@router.post("/plants/{plant_id}/delete")
def delete_plant(plant_id: int, request: Request):
    _get_registry(request).delete(plant_id)
    return _back_home()
