"""
Komenda: thoth chat — tryb czatu: komendy z prefiksem czytane ze stdin.

Każda linia zaczynająca się od prefiksu (domyślnie "??") to osobne
zapytanie, np.::

    ??cr 1.2.a
    ??rule 4.1
    ??glossary Exhaust
    ??about "Expedition phase" false
    ??contents
    ??version
    ??help

Pozostałe linie są ignorowane. Błąd w jednym zapytaniu (np. uszkodzony
węzeł dokumentu) jest logowany i zwracany jako wynik z is_error=True;
pętla działa dalej.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from collections.abc import Callable, Iterable

from rulebook import (
    DisplayResult,
    Document,
    Field,
    MalformedDocumentError,
    list_top_level_contents,
    lookup_glossary,
    lookup_rule,
    version_info,
)

from thoth import __version__
from thoth._config import get_settings
from thoth._document import get_document
from thoth.display import show

logger = logging.getLogger(__name__)

_FALSE = {"false", "no", "0", "off"}
_TRUE  = {"true", "yes", "1", "on"}


def _usage(text: str) -> DisplayResult:
    return DisplayResult(title="Invalid command", description=text, is_error=True)


def _cmd_rule(document: Document, argv: list[str]) -> DisplayResult:
    if len(argv) != 1:
        return _usage("Usage: cr <number>")
    return lookup_rule(document, argv[0])


def _cmd_glossary(document: Document, argv: list[str]) -> DisplayResult:
    if not 1 <= len(argv) <= 2:
        return _usage("Usage: glossary <word> [related: true|false]")
    include_related = True
    if len(argv) == 2:
        flag = argv[1].lower()
        if flag in _FALSE:
            include_related = False
        elif flag not in _TRUE:
            return _usage(f'Invalid value "{argv[1]}" for related (expected true or false)')
    return lookup_glossary(document, argv[0], include_related=include_related)


def _cmd_contents(document: Document, argv: list[str]) -> DisplayResult:
    return list_top_level_contents(document)


def _cmd_version(document: Document, argv: list[str]) -> DisplayResult:
    return version_info(document, __version__)


def _cmd_help(document: Document, argv: list[str]) -> DisplayResult:
    return DisplayResult(
        title="Help",
        description="Available commands:",
        fields=tuple(Field(name, text) for name, text in HELP.items()),
    )


Handler = Callable[[Document, list[str]], DisplayResult]

COMMANDS: dict[str, Handler] = {
    "cr":       _cmd_rule,
    "rule":     _cmd_rule,
    "glossary": _cmd_glossary,
    "about":    _cmd_glossary,
    "contents": _cmd_contents,
    "version":  _cmd_version,
    "help":     _cmd_help,
}

HELP: dict[str, str] = {
    "cr <number>":                  "Displays the requested ruling (alias: rule)",
    "glossary <word> [true|false]": "Displays the glossary entry of the requested word (alias: about)",
    "contents":                     "Displays the table of contents",
    "version":                      "Version of the Comprehensive rules",
    "help":                         "Show the help menu",
}


def dispatch(document: Document, line: str, prefix: str = "??") -> DisplayResult | None:
    """
    Obsługuje jedną linię czatu.

    Returns:
        DisplayResult albo None gdy linia nie jest komendą (brak prefiksu).
    """
    line = line.strip()
    if not line.startswith(prefix):
        return None

    try:
        argv = shlex.split(line[len(prefix):])
    except ValueError as e:
        return _usage(f"Cannot parse command: {e}")
    if not argv:
        return None

    name, argv = argv[0], argv[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        return _usage(f'Unknown command "{name}". Try {prefix}help')

    try:
        return handler(document, argv)
    except MalformedDocumentError as e:
        logger.exception("Zapytanie '%s' przerwane: uszkodzony dokument", line)
        return DisplayResult(title="Internal error", description=str(e), is_error=True)


def serve(document: Document, lines: Iterable[str], prefix: str = "??") -> int:
    """Obsługuje kolejne linie; zwraca liczbę obsłużonych komend."""
    handled = 0
    for line in lines:
        result = dispatch(document, line, prefix)
        if result is None:
            continue
        show(result)
        handled += 1
    return handled


def run(args: argparse.Namespace) -> None:
    document = get_document(args)
    prefix   = args.prefix or get_settings().prefix
    handled  = serve(document, sys.stdin, prefix)
    logger.info("Koniec wejścia, obsłużono %d komend", handled)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "chat",
        help="Tryb czatu: czyta komendy z prefiksem ze stdin.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Czyta linie ze stdin i obsługuje te, które zaczynają się od prefiksu.

Przykłady:
  thoth chat
  echo "??cr 1.2" | thoth chat
  thoth chat --prefix "!"
        """,
    )
    p.add_argument(
        "--prefix",
        metavar="PREFIKS",
        help="Prefiks komend (domyślnie THOTH_PREFIX lub '??').",
    )
    p.set_defaults(func=run)
