import logging
import os

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from garden.core.config import Settings, get_settings
from garden.core.logging import configure_logging
from garden.repositories.kv_store import open_store
from garden.repositories.plant_storage import PlantStorage
from garden.routers import plants as plants_router
from garden.services.plant_registry import PlantRegistry

logger = logging.getLogger(__name__)

BASE = os.path.dirname(__file__)
TEMPLATES_DIR = os.path.join(BASE, "templates")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, no sniffing)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Content-Security-Policy", "default-src 'self'; style-src 'self' 'unsafe-inline'")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        return response


def build_registry(settings: Settings) -> PlantRegistry:
    storage = PlantStorage(open_store(settings), key=settings.storage_key)
    return PlantRegistry(storage)


def create_app(settings: Settings | None = None, registry: PlantRegistry | None = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn (uvicorn garden.app:create_app --factory)."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Garden Monitor")
    app.add_middleware(SecurityHeadersMiddleware)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)
    app.state.plant_registry = registry if registry is not None else build_registry(settings)
    app.include_router(plants_router.router)
    logger.info("Garden Monitor ready (storage=%s, env=%s)", settings.storage_backend, settings.app_env)
    return app
