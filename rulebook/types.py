"""
rulebook/types.py — typy danych dokumentu zasad i wyniku wyświetlania.

Document      — opakowanie na wczytane drzewo JSON (RULES, GLOSSARY, VERSION, ABOUT)
Section, Rule — dwa warianty węzła drzewa (Node = Section | Rule)
GlossaryEntry — wpis słownika
DisplayResult — ustrukturyzowany wynik dla warstwy prezentacji
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias


# ---------------------------------------------------------------------------
# Wyjątki
# ---------------------------------------------------------------------------

class RulebookError(Exception):
    """Bazowy wyjątek pakietu rulebook."""


class DocumentLoadError(RulebookError):
    """Źródło dokumentu jest nieczytelne lub nie zawiera poprawnego JSON."""


class MalformedDocumentError(RulebookError):
    """Węzeł lub wpis słownika łamie niezmiennik schematu dokumentu."""


class UnresolvedIdentifierError(RulebookError, KeyError):
    """Identyfikator nie wskazuje żadnego węzła w drzewie RULES."""

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Nie znaleziono węzła dla identyfikatora '{self.identifier}'"


# ---------------------------------------------------------------------------
# Dokument
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Document:
    """
    Wczytany dokument zasad. Tylko do odczytu po załadowaniu.

    Struktura najwyższego poziomu:
      RULES    — mapa "1" → sekcja
      GLOSSARY — mapa termin → {DESCRIPTION, RELATED}
      VERSION  — wersja dokumentu
      ABOUT    — opis dokumentu
    """
    raw: Mapping[str, Any]

    @property
    def rules(self) -> Mapping[str, Any]:
        return self._section("RULES")

    @property
    def glossary(self) -> Mapping[str, Any]:
        return self._section("GLOSSARY")

    def _section(self, key: str) -> Mapping[str, Any]:
        value = self.raw.get(key, {})
        if not isinstance(value, Mapping):
            raise MalformedDocumentError(f"{key} nie jest obiektem")
        return value

    @property
    def version(self) -> str:
        return str(self.raw.get("VERSION", ""))

    @property
    def about(self) -> str:
        return str(self.raw.get("ABOUT", ""))


# ---------------------------------------------------------------------------
# Węzły drzewa
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Section:
    """
    Sekcja: nazwana grupa z dziećmi.

    - identifier: np. "1.2"
    - name:       pole NAME
    - content:    mapa identyfikator dziecka → surowy węzeł (kolejność dokumentu)
    """
    identifier: str
    name:       str
    content:    Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Reguła (liść): tekst RULE plus pola pomocnicze w kolejności dokumentu.
    """
    identifier: str
    text:       str
    extra:      dict[str, str] = field(default_factory=dict)


Node: TypeAlias = Section | Rule


@dataclass(frozen=True, slots=True)
class GlossaryEntry:
    term:        str
    description: str
    related:     tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Wynik wyświetlania
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Field:
    label: str
    value: str


@dataclass(frozen=True, slots=True)
class DisplayResult:
    """
    Wynik pojedynczego zapytania, gotowy do narysowania.

    - title:       nagłówek
    - description: treść główna
    - fields:      etykietowane pola w kolejności wyświetlania
    - is_error:    True dla "nie znaleziono" i błędów zapytania
    """
    title:       str
    description: str
    fields:      tuple[Field, ...] = ()
    is_error:    bool = False

    def field(self, label: str) -> str | None:
        """Zwraca wartość pierwszego pola o danej etykiecie (lub None)."""
        for f in self.fields:
            if f.label == label:
                return f.value
        return None
