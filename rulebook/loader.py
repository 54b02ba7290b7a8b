"""
rulebook/loader.py — jednorazowe wczytanie dokumentu zasad z pliku JSON.

Publiczne API:
  load_document(path)       -> Document
  document_from_dict(data)  -> Document

Loader sprawdza tylko, czy dane są poprawnym obiektem JSON. Zgodność ze
schematem (NAME / CONTENT / RULE) wychodzi dopiero przy wyszukiwaniu.
"""

from __future__ import annotations

import json
import logging
import pathlib
from collections.abc import Mapping
from typing import Any

from .types import Document, DocumentLoadError

logger = logging.getLogger(__name__)


def document_from_dict(data: Mapping[str, Any]) -> Document:
    """Buduje Document z już sparsowanego słownika."""
    if not isinstance(data, Mapping):
        raise DocumentLoadError(
            f"Dokument musi być obiektem JSON, otrzymano {type(data).__name__}"
        )
    return Document(raw=data)


def load_document(path: str | pathlib.Path) -> Document:
    """
    Wczytuje dokument zasad z pliku JSON (UTF-8).

    Oczekiwany format::

        {
            "VERSION":  "1.0",
            "ABOUT":    "...",
            "RULES":    {"1": {"NAME": "...", "CONTENT": {"1.1": {"RULE": "..."}}}},
            "GLOSSARY": {"Exhaust": {"DESCRIPTION": "...", "RELATED": ["1.1"]}}
        }

    Raises:
        DocumentLoadError gdy pliku nie da się odczytać lub sparsować.
    """
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Nie można odczytać pliku {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Niepoprawny JSON w {path}: {e}") from e

    document = document_from_dict(data)
    logger.info("Wczytano dokument %s (wersja %s)", path, document.version or "—")
    return document
