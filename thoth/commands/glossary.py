"""Komenda: thoth glossary — wyświetla hasło ze słownika."""

from __future__ import annotations

import argparse

from rich.console import Console

from rulebook import MalformedDocumentError, lookup_glossary

from thoth._document import get_document
from thoth.display import show

console = Console()


def run(args: argparse.Namespace) -> None:
    document = get_document(args)
    try:
        result = lookup_glossary(document, args.word, include_related=not args.no_related)
    except MalformedDocumentError as e:
        console.print(f"[red]Uszkodzony dokument:[/red] {e}")
        raise SystemExit(1)
    show(result)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "glossary",
        aliases=["about"],
        help="Wyświetla hasło ze słownika.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Szuka hasła w słowniku (dokładne dopasowanie, z rozróżnieniem wielkości liter).

Przykłady:
  thoth glossary Exhaust
  thoth about Reserve --no-related
        """,
    )
    p.add_argument("word", metavar="HASŁO", help="Szukane hasło.")
    p.add_argument(
        "--no-related",
        action="store_true",
        help="Nie pokazuj powiązanych reguł.",
    )
    p.set_defaults(func=run)
