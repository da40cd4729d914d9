"""
Configuration helpers for the Garden Monitor backend.

Settings are read once from environment variables (storage backend, data file,
database URL, log level) so that routers/services/scripts do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    storage_key: str
    default_frequency: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("GARDEN_STORAGE") or "json").strip().lower(),
        data_file=Path(os.getenv("GARDEN_DATA_FILE") or DEFAULT_DATA_FILE),
        database_url=os.getenv("DATABASE_URL", ""),
        storage_key=(os.getenv("GARDEN_STORAGE_KEY") or "plants").strip() or "plants",
        default_frequency=max(1, _int(os.getenv("GARDEN_DEFAULT_FREQUENCY", "3"), 3)),
        log_level=(os.getenv("GARDEN_LOG_LEVEL") or "INFO").upper(),
    )
