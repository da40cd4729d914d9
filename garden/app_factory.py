"""Entry point for the Garden Monitor FastAPI app."""
from garden.app import build_registry, create_app

__all__ = ["build_registry", "create_app"]
