"""
rulebook/service.py — operacje zapytań wywoływane przez warstwę komend.

Publiczne API (każda operacja dostaje Document jawnie):
  lookup_rule(document, identifier)                      -> DisplayResult
  lookup_glossary(document, term, include_related=True)  -> DisplayResult
  list_top_level_contents(document)                      -> DisplayResult
  version_info(document, bot_version)                    -> DisplayResult

"Nie znaleziono" to zwykły wynik z is_error=True. MalformedDocumentError
jest propagowany do wywołującego; izolacja do pojedynczego zapytania należy
do warstwy komend.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .render import list_contents, render_node, render_not_found
from .resolver import access_path, resolve
from .types import (
    DisplayResult,
    Document,
    Field,
    GlossaryEntry,
    MalformedDocumentError,
)

logger = logging.getLogger(__name__)


def lookup_rule(document: Document, identifier: str) -> DisplayResult:
    logger.debug("Zapytanie o regułę '%s' → %s", identifier, "/".join(access_path(identifier)))
    node = resolve(document, identifier)
    if node is None:
        return render_not_found(identifier)
    return render_node(document, node, identifier)


def glossary_entry(document: Document, term: str, include_related: bool = True) -> GlossaryEntry | None:
    """
    Szuka hasła w GLOSSARY (płaski klucz, bez przechodzenia drzewa).

    RELATED jest wymagane tylko gdy include_related=True.

    Raises:
        MalformedDocumentError gdy brakuje DESCRIPTION lub RELATED.
    """
    raw = document.glossary.get(term)
    if raw is None:
        return None
    if not isinstance(raw, Mapping) or not isinstance(raw.get("DESCRIPTION"), str):
        raise MalformedDocumentError(f"Hasło słownika '{term}': brak DESCRIPTION")

    related: tuple[str, ...] = ()
    if include_related:
        rel = raw.get("RELATED")
        if not isinstance(rel, list):
            raise MalformedDocumentError(f"Hasło słownika '{term}': brak listy RELATED")
        related = tuple(str(r) for r in rel)

    return GlossaryEntry(term=term, description=raw["DESCRIPTION"], related=related)


def lookup_glossary(document: Document, term: str, include_related: bool = True) -> DisplayResult:
    entry = glossary_entry(document, term, include_related)
    if entry is None:
        logger.debug("Brak hasła '%s' w słowniku", term)
        return DisplayResult(
            title="Not found",
            description=f'Error - Entry "{term}" not found',
            is_error=True,
        )

    fields: tuple[Field, ...] = ()
    if include_related:
        # bez sprawdzania, czy identyfikatory istnieją w drzewie
        fields = (Field("Related rules", " ".join(entry.related)),)
    return DisplayResult(title=entry.term, description=entry.description, fields=fields)


def list_top_level_contents(document: Document) -> DisplayResult:
    return DisplayResult(
        title="Table of contents",
        description=list_contents(document.rules),
        fields=(Field("About", document.about),),
    )


def version_info(document: Document, bot_version: str) -> DisplayResult:
    return DisplayResult(
        title="Version",
        description="",
        fields=(
            Field("Comprehensive Rules Version", document.version),
            Field("Bot Version", bot_version),
        ),
    )
