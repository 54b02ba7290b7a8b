"""
rulebook/resolver.py — rozwiązywanie identyfikatorów reguł w drzewie RULES.

Identyfikator "1.2.a" daje ścieżkę dostępu::

    ["RULES", "1", "CONTENT", "1.2", "CONTENT", "1.2.a"]

Klucze w CONTENT są skumulowane: każdy kolejny segment dokleja się do
poprzedniego klucza. resolve() i ancestor_names() korzystają z tego samego
przejścia (_walk), więc zawsze zgadzają się co do tego, co jest poprawne.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .types import Document, MalformedDocumentError, UnresolvedIdentifierError

logger = logging.getLogger(__name__)

TRAIL_SEPARATOR = " / "


def access_path(identifier: str) -> list[str]:
    """
    Zamienia identyfikator na listę kluczy dostępu.

    Przykłady::

        "1"     → ["RULES", "1"]
        "1.2.a" → ["RULES", "1", "CONTENT", "1.2", "CONTENT", "1.2.a"]
    """
    segments = identifier.split(".")
    path = ["RULES", segments[0]]
    key  = segments[0]
    for seg in segments[1:]:
        key = f"{key}.{seg}"
        path += ["CONTENT", key]
    return path


def _walk(document: Document, identifier: str) -> Iterator[Any]:
    """
    Przechodzi ścieżkę dostępu i zwraca kolejne odwiedzone węzły.

    Po nieudanym kroku (brak klucza albo węzeł nie jest mapą) zwraca None
    i kończy.
    """
    head: Any = document.rules
    for key in access_path(identifier)[1:]:
        if not isinstance(head, Mapping) or key not in head:
            yield None
            return
        head = head[key]
        yield head


def _visited(document: Document, identifier: str) -> list[Any] | None:
    """Lista węzłów na ścieżce albo None, gdy ścieżka nie prowadzi do węzła."""
    visited: list[Any] = []
    for node in _walk(document, identifier):
        if node is None:
            return None
        visited.append(node)
    if not isinstance(visited[-1], Mapping):
        return None
    return visited


def resolve(document: Document, identifier: str) -> Mapping[str, Any] | None:
    """
    Zwraca surowy węzeł (sekcję lub regułę) albo None gdy nie znaleziono.

    Nie ma dopasowań częściowych ani cofania: każdy krok musi się udać.
    """
    visited = _visited(document, identifier)
    if visited is None:
        logger.debug("Nie znaleziono '%s' (ścieżka %s)", identifier, access_path(identifier))
        return None
    return visited[-1]


def ancestor_names(document: Document, identifier: str) -> list[str]:
    """
    Zbiera pola NAME węzłów na ścieżce identyfikatora (od korzenia do liścia).

    Reguły nie mają NAME, więc nie są liczone.

    Raises:
        UnresolvedIdentifierError gdy identyfikator się nie rozwiązuje.
        MalformedDocumentError gdy NAME sekcji na ścieżce nie jest tekstem.
    """
    visited = _visited(document, identifier)
    if visited is None:
        raise UnresolvedIdentifierError(identifier)
    names: list[str] = []
    for node in visited:
        if isinstance(node, Mapping) and "NAME" in node:
            if not isinstance(node["NAME"], str):
                raise MalformedDocumentError(f"Sekcja na ścieżce '{identifier}': NAME nie jest tekstem")
            names.append(node["NAME"])
    return names


def ancestor_trail(document: Document, identifier: str) -> str:
    """Ścieżka sekcji w postaci "Basics / Turn / Morning"."""
    return TRAIL_SEPARATOR.join(ancestor_names(document, identifier))
