"""
Typed settings for the ScrollDown client.

Uses Pydantic Settings to load configuration from environment variables
with validation and type safety. A root .env file is read for local
development when present.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .validate_env import validate_env

DataMode = Literal["mock", "api"]

DEFAULT_MOCK_DATA_DIR = Path(__file__).resolve().parent / "data" / "mock"


class ServiceConfig(BaseModel):
    request_timeout_seconds: float = 15.0
    # Simulated latency for the mock service so loading states are visible
    mock_delay_seconds: float = 0.15
    mock_data_dir: str = str(DEFAULT_MOCK_DATA_DIR)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    SCROLLDOWN_DATA_MODE switches between bundled mock data and the live
    API, mirroring the app's developer toggle.
    """
    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="allow",
    )

    environment: str = Field("development", alias="ENVIRONMENT")
    log_level: str | None = Field(None, alias="LOG_LEVEL")
    data_mode: DataMode = Field("mock", alias="SCROLLDOWN_DATA_MODE")
    api_base_url: str = Field("http://localhost:8000", alias="SCROLLDOWN_API_BASE_URL")
    service_config: ServiceConfig = Field(default_factory=ServiceConfig)
    request_timeout_override: float | None = Field(None, alias="SCROLLDOWN_REQUEST_TIMEOUT")
    mock_data_dir_override: str | None = Field(None, alias="SCROLLDOWN_MOCK_DATA_DIR")

    @field_validator("data_mode", mode="before")
    @classmethod
    def normalize_data_mode(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def _apply_service_overrides(self) -> Settings:
        """
        Allow top-level env vars to override the nested service config
        without requiring double-underscore syntax.
        """
        if self.request_timeout_override is not None:
            self.service_config.request_timeout_seconds = self.request_timeout_override
        if self.mock_data_dir_override:
            self.service_config.mock_data_dir = self.mock_data_dir_override
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance, validating the environment first."""
    validate_env()
    return Settings()


settings = get_settings()
