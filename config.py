"""
Centralised settings loader (pydantic-settings).

Every field maps to the upper-cased env var of the same name
(`database_url` ← DATABASE_URL) and may also come from `.env`.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ────────────────────────────────────────────────
    env_name: str = "local"
    database_url: str | None = None
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ─── planning ───────────────────────────────────────────────────
    catalog_path: str | None = None          # JSON catalog; built-in if unset
    default_plan_days: int = Field(7, ge=1)
    max_plan_days: int = Field(31, ge=1)
    # extra restriction tags, e.g. RESTRICTION_ALIASES='{"veggie": "vegetarian"}'
    restriction_aliases: dict[str, str] = Field(default_factory=dict)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
