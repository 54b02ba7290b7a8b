"""Wczytanie dokumentu zasad dla komend. Błąd wczytania kończy program."""

from __future__ import annotations

import argparse

from rich.console import Console

from rulebook import Document, DocumentLoadError, load_document

from thoth._config import get_settings

console = Console(stderr=True)


def get_document(args: argparse.Namespace) -> Document:
    path = getattr(args, "document", None) or get_settings().document_path
    try:
        return load_document(path)
    except DocumentLoadError as e:
        console.print(f"[red]Błąd wczytywania dokumentu:[/red] {e}")
        raise SystemExit(1)
