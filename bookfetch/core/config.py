from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# bookfetch/core/config.py -> BASE_DIR == repository root
BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    log_level: str = Field(default="WARNING", validation_alias="LOG_LEVEL")
    user_agent: str = Field(default="bookfetch/0.1", validation_alias="USER_AGENT")

    # HTTP
    fetch_timeout_secs: float = Field(
        default=15.0, validation_alias="BOOKFETCH_TIMEOUT_SECS"
    )
    follow_redirects: bool = Field(
        default=True, validation_alias="BOOKFETCH_FOLLOW_REDIRECTS"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        if v is None:
            return "WARNING"
        if not isinstance(v, str):
            raise TypeError("LOG_LEVEL must be a string")
        return v.strip().upper() or "WARNING"

    @field_validator("fetch_timeout_secs")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("BOOKFETCH_TIMEOUT_SECS must be greater than zero")
        return v


settings = Settings()
