"""Konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    document_path: str
    prefix:        str
    log_level:     str


def get_settings() -> Settings:
    return Settings(
        document_path = os.getenv("THOTH_DOCUMENT",  "cr.json"),
        prefix        = os.getenv("THOTH_PREFIX",    "??"),
        log_level     = os.getenv("THOTH_LOG_LEVEL", "WARNING").upper(),
    )
