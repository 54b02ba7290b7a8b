"""Komenda: thoth cr — wyświetla regułę lub sekcję o podanym numerze."""

from __future__ import annotations

import argparse

from rich.console import Console

from rulebook import MalformedDocumentError, lookup_rule

from thoth._document import get_document
from thoth.display import show

console = Console()


def run(args: argparse.Namespace) -> None:
    document = get_document(args)
    try:
        result = lookup_rule(document, args.number)
    except MalformedDocumentError as e:
        console.print(f"[red]Uszkodzony dokument:[/red] {e}")
        raise SystemExit(1)
    show(result)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "cr",
        aliases=["rule"],
        help="Wyświetla regułę lub sekcję o podanym numerze.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla regułę (tekst + pola pomocnicze) albo sekcję (nazwa + zawartość).
Numer to identyfikator z kropkami, np. 1.2.a.

Przykłady:
  thoth cr 1
  thoth cr 1.2.a
  thoth rule 4.1
        """,
    )
    p.add_argument("number", metavar="NUMER", help="Numer reguły, np. 1.2.a.")
    p.set_defaults(func=run)
