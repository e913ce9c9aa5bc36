from __future__ import annotations

import math
from typing import Any, List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ROBOT_COUNT = 20
DEFAULT_MOVE_METERS = 1.0
DEFAULT_MOVE_INTERVAL_MS = 60000.0


def _positive_or(value: Any, default: float) -> Any:
    """Mirror `Number(env) || default`: unset, zero, junk and NaN fall back."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number <= 0:
        return default
    return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # ------------------------------------------------------------
    # Server
    # ------------------------------------------------------------
    backend_host: str = "0.0.0.0"
    backend_port: int = Field(default=4000, validation_alias=AliasChoices("PORT", "BACKEND_PORT", "backend_port"))
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"

    # ------------------------------------------------------------
    # Fleet
    # ------------------------------------------------------------
    robot_count: int = DEFAULT_ROBOT_COUNT
    move_meters: float = DEFAULT_MOVE_METERS
    move_interval_ms: float = DEFAULT_MOVE_INTERVAL_MS
    # Arm the auto-step schedule when the app starts
    auto_start: bool = True

    # ------------------------------------------------------------
    # CORS
    # ------------------------------------------------------------
    # Comma-separated origins, e.g. "http://localhost:5173,https://example.com"
    cors_origins: str = "*"

    @field_validator("robot_count", mode="before")
    @classmethod
    def _count_fallback(cls, v: Any) -> Any:
        value = _positive_or(v, DEFAULT_ROBOT_COUNT)
        return int(float(value))

    @field_validator("move_meters", mode="before")
    @classmethod
    def _meters_fallback(cls, v: Any) -> Any:
        return _positive_or(v, DEFAULT_MOVE_METERS)

    @field_validator("move_interval_ms", mode="before")
    @classmethod
    def _interval_fallback(cls, v: Any) -> Any:
        return _positive_or(v, DEFAULT_MOVE_INTERVAL_MS)

    @property
    def cors_origins_list(self) -> List[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


settings = Settings()
