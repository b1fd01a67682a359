"""Application settings loaded from environment variables.

Uses pydantic-settings for validation and type coercion. All keys use
the ``YOJANA_`` prefix (for example ``YOJANA_LOG_LEVEL``) and may also
be supplied through a ``.env`` file.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Central configuration for the Yojana Saathi service."""

    model_config = SettingsConfigDict(
        env_prefix="YOJANA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ── App ────────────────────────────────────────────────────────────
    env: Literal["development", "production"] = "development"

    # ── API ────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # ── Logging ────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ── Catalog & demo data ────────────────────────────────────────────
    scheme_catalog_path: str | None = None  # None -> bundled catalog.json
    seed_demo_data: bool = True

    # ── Recommendations ────────────────────────────────────────────────
    top_recommendations: int = Field(default=3, ge=1, le=50)

    # ── Derived Properties ─────────────────────────────────────────────

    @property
    def is_production(self) -> bool:
        return self.env == Environment.PRODUCTION


# Module-level singleton -- import ``settings`` everywhere.
settings = Settings()
