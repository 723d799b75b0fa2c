"""Application settings, overridable through ``GRAPHLAB_*`` environment variables.

- GRAPHLAB_CORS_ORIGINS='["http://localhost:5173"]'
- GRAPHLAB_SAMPLES_DIR=/path/to/samples
- GRAPHLAB_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRAPHLAB_")

    cors_origins: list[str] = ["http://localhost:5173"]
    samples_dir: Path = DEFAULT_SAMPLES_DIR
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
