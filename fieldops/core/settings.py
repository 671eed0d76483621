# fieldops/core/settings.py
import os
from functools import lru_cache
from typing import Dict, List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Algemene app settings ===
    app_env: str = "local"  # local | development | production

    # === Database (Supabase Postgres in prod, sqlite lokaal) ===
    database_url: str = "sqlite:///./fieldops.db"

    # === Auth (Supabase access tokens) ===
    SUPABASE_JWT_SECRET: str = Field(
        "dev-secret-change-me", description="HS256 secret used to sign Supabase access tokens"
    )
    JWT_AUDIENCE: str = "authenticated"
    AUTH_COOKIE_NAME: str = "accessToken"

    # === CORS ===
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    # === Logging ===
    log_level: str = "INFO"

    # === Metrics ===
    metrics_enabled: bool = True

    # === Pricing ===
    # client-name substring (case-insensitive) -> quote prefix
    quote_prefixes: Dict[str, str] = {"openserve": "OSV", "vumatel": "VUM"}
    quote_week_offset: int = 1000
    # fallback per price-sheet column when a row exists but the column is empty
    default_rates: Dict[str, float] = {"per_meter_rate": 19.98, "discount": 1.0}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton Settings instance met simpele env-overrides."""
    s = Settings()

    env = os.getenv("ENVIRONMENT", s.app_env).lower()
    if env == "production":
        s.log_level = "WARNING"
    elif env == "development":
        s.log_level = "DEBUG"

    return s


settings = get_settings()
