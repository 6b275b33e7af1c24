from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

DEFAULT_MAX_DEPTH = 8


@dataclass
class Settings:
    max_depth: int
    log_level: str
    cors_origins: Tuple[str, ...]


def _split_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        max_depth=int(os.getenv("WIDGETSPEC_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))),
        log_level=os.getenv("WIDGETSPEC_LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("WIDGETSPEC_CORS_ORIGINS", "*")),
    )
