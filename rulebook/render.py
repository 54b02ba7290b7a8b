"""
rulebook/render.py — klasyfikacja węzłów i budowa DisplayResult.

classify() jest jedynym miejscem, które sprawdza dyskryminator NAME:
węzeł z NAME to Section, bez NAME to Rule.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .icons import iconify
from .resolver import ancestor_trail
from .types import (
    DisplayResult,
    Document,
    Field,
    MalformedDocumentError,
    Node,
    Rule,
    Section,
)

PREVIEW_LENGTH = 40


# ---------------------------------------------------------------------------
# Klasyfikacja
# ---------------------------------------------------------------------------

def classify(node: Any, identifier: str) -> Node:
    """
    Zamienia surowy węzeł na Section albo Rule.

    Sekcja bez CONTENT jest poprawna (pusta lista zawartości).

    Raises:
        MalformedDocumentError gdy NAME / RULE / pola pomocnicze nie są tekstem
        albo CONTENT nie jest mapą.
    """
    if not isinstance(node, Mapping):
        raise MalformedDocumentError(f"Węzeł '{identifier}' nie jest obiektem")

    if "NAME" in node:
        name    = node["NAME"]
        content = node.get("CONTENT", {})
        if not isinstance(name, str):
            raise MalformedDocumentError(f"Sekcja '{identifier}': NAME nie jest tekstem")
        if not isinstance(content, Mapping):
            raise MalformedDocumentError(f"Sekcja '{identifier}': CONTENT nie jest obiektem")
        return Section(identifier=identifier, name=name, content=content)

    text = node.get("RULE")
    if not isinstance(text, str):
        raise MalformedDocumentError(f"Reguła '{identifier}': brak pola RULE")

    extra: dict[str, str] = {}
    for key, value in node.items():
        if key == "RULE":
            continue
        if not isinstance(value, str):
            raise MalformedDocumentError(
                f"Reguła '{identifier}': pole {key} nie jest tekstem"
            )
        extra[key] = value
    return Rule(identifier=identifier, text=text, extra=extra)


# ---------------------------------------------------------------------------
# Lista zawartości
# ---------------------------------------------------------------------------

def list_contents(content: Mapping[str, Any]) -> str:
    """
    Jedna linia na dziecko, w kolejności dokumentu::

        1.1 - Setup
        1.2 *Players may not concede....*

    Podgląd reguły to pierwsze 40 znaków RULE (bez szukania granicy słowa).
    """
    lines: list[str] = []
    for key, child in content.items():
        match classify(child, key):
            case Section(name=name):
                lines.append(f"{key} - {name}")
            case Rule(text=text):
                lines.append(f"{key} *{text[:PREVIEW_LENGTH]}...*")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Renderowanie
# ---------------------------------------------------------------------------

def render_node(document: Document, node: Mapping[str, Any], identifier: str) -> DisplayResult:
    """Buduje wynik dla rozwiązanego węzła (reguły lub sekcji)."""
    trail = ancestor_trail(document, identifier)

    match classify(node, identifier):
        case Rule(text=text, extra=extra):
            fields = [Field(label, iconify(value)) for label, value in extra.items()]
            fields.append(Field("In section", trail))
            return DisplayResult(
                title=f"Rule {identifier}",
                description=iconify(text),
                fields=tuple(fields),
            )
        case Section(name=name, content=content):
            return DisplayResult(
                title=f"Section {identifier} - {name}",
                description=trail,
                fields=(Field("Contents", list_contents(content)),),
            )


def render_not_found(identifier: str) -> DisplayResult:
    return DisplayResult(
        title="Invalid rule number",
        description=f'Error - Rule "{identifier}" not found',
        is_error=True,
    )
