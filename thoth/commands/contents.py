"""Komenda: thoth contents — spis treści dokumentu."""

from __future__ import annotations

import argparse

from rich.console import Console

from rulebook import MalformedDocumentError, list_top_level_contents

from thoth._document import get_document
from thoth.display import show

console = Console()


def run(args: argparse.Namespace) -> None:
    document = get_document(args)
    try:
        result = list_top_level_contents(document)
    except MalformedDocumentError as e:
        console.print(f"[red]Uszkodzony dokument:[/red] {e}")
        raise SystemExit(1)
    show(result)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "contents",
        help="Wyświetla spis treści (sekcje najwyższego poziomu).",
    )
    p.set_defaults(func=run)
