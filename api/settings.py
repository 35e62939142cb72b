"""
API settings read from the environment.

Environment variables (loaded from the project .env file):
- DEFAULT_PAGE_SIZE: Page size when the caller does not send one (default: 10)
- MAX_PAGE_SIZE: Largest page size a caller may request (default: 100)
- CORS_ORIGINS: Comma-separated allowed origins (default: *)
- LOG_LEVEL: Root log level (default: INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from services.query_service import DEFAULT_PAGE_SIZE

env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name}: {raw!r}. Must be an integer.")
    if value < 1:
        raise RuntimeError(f"{name} must be >= 1, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class ApiSettings:
    default_page_size: int
    max_page_size: int
    cors_origins: List[str]
    log_level: str


@lru_cache
def get_settings() -> ApiSettings:
    """Read settings once per process."""

    default_page_size = _int_from_env("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)
    max_page_size = _int_from_env("MAX_PAGE_SIZE", 100)
    if default_page_size > max_page_size:
        raise RuntimeError(
            f"DEFAULT_PAGE_SIZE ({default_page_size}) must not exceed MAX_PAGE_SIZE ({max_page_size})"
        )

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return ApiSettings(
        default_page_size=default_page_size,
        max_page_size=max_page_size,
        cors_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["ApiSettings", "get_settings"]
