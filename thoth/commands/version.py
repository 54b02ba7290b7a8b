"""Komenda: thoth version — wersja dokumentu zasad i programu."""

from __future__ import annotations

import argparse

from rulebook import version_info

from thoth import __version__
from thoth._document import get_document
from thoth.display import show


def run(args: argparse.Namespace) -> None:
    show(version_info(get_document(args), __version__))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "version",
        help="Wyświetla wersję dokumentu zasad i programu.",
    )
    p.set_defaults(func=run)
