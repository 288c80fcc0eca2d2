"""Environment-driven settings for the calculator API."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings(
        cors_origins=_split_origins(os.getenv("FD_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
        log_level=os.getenv("FD_LOG_LEVEL", "INFO").upper(),
    )
