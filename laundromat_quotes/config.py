"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from laundromat_quotes.pricing.catalog import PriceCatalog


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Laundromat Quote Engine"
    debug: bool = False

    # ── Pricing ──────────────────────────────────────────
    catalog_path: Optional[str] = None  # JSON price catalog; built-in defaults when unset
    default_interest_rate_percent: float = 9.0

    # ── Quote records ────────────────────────────────────
    quote_validity_days: int = 30
    default_quote_status: str = "New"

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "QUOTES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()


@lru_cache()
def get_catalog() -> "PriceCatalog":
    """Return the price catalog for this process, loaded once."""
    from laundromat_quotes.pricing.catalog import PriceCatalog, load_catalog

    settings = get_settings()
    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    return PriceCatalog()
