"""
Process settings for the member portal, loaded from `.env` and the environment.
Only values every entrypoint needs are required; page tuning lives in `src/portal/portal_config.py`.
Validation uppercases the log level and normalizes the API base URL; unknown levels are resolved in logging setup.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

REQUIRED_ENV_VARS: Final[tuple[str, ...]] = (
    "PROJECT_NAME",
    "ENV",
    "LOG_LEVEL",
    "PORTAL_API_BASE_URL",
)


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str
    ENV: str
    LOG_LEVEL: str
    PORTAL_API_BASE_URL: str

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("PORTAL_API_BASE_URL")
    @classmethod
    def _http_base_url(cls, value: str) -> str:
        url = value.strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError("PORTAL_API_BASE_URL must start with http:// or https://")
        return url


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings; raise RuntimeError listing every missing variable."""

    if load_env:
        load_dotenv()

    missing = [key for key in REQUIRED_ENV_VARS if not os.getenv(key)]
    if missing:
        raise RuntimeError(
            f"Missing required environment variables: {', '.join(sorted(missing))}. "
            "Copy `.env.example` to `.env` and fill them in before starting the portal."
        )

    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
