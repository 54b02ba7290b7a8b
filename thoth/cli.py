"""
thoth — narzędzie CLI do przeglądania dokumentu zasad.

Użycie:
  thoth [--document PLIK] [--log-level POZIOM] <komenda> [opcje]

Komendy:
  cr (rule)         Wyświetla regułę lub sekcję o podanym numerze.
  glossary (about)  Wyświetla hasło ze słownika.
  contents          Wyświetla spis treści.
  version           Wyświetla wersję dokumentu zasad i programu.
  chat              Tryb czatu: komendy z prefiksem "??" czytane ze stdin.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla polskich znaków
# w tekstach pomocy i dla tekstu reguł.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from thoth import __version__
from thoth._config import get_settings
from thoth._log import setup_logging
from thoth.commands import chat as cmd_chat
from thoth.commands import contents as cmd_contents
from thoth.commands import cr as cmd_cr
from thoth.commands import glossary as cmd_glossary
from thoth.commands import version as cmd_version


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thoth",
        description="thoth — wyszukiwanie reguł i haseł w dokumencie zasad.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"thoth {__version__}"
    )
    parser.add_argument(
        "--document",
        metavar="PLIK",
        help="Plik JSON z dokumentem zasad (domyślnie THOTH_DOCUMENT lub cr.json).",
    )
    parser.add_argument(
        "--log-level",
        metavar="POZIOM",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Poziom logowania (domyślnie THOTH_LOG_LEVEL lub WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_cr.add_parser(subparsers)
    cmd_glossary.add_parser(subparsers)
    cmd_contents.add_parser(subparsers)
    cmd_version.add_parser(subparsers)
    cmd_chat.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)
    args.func(args)


if __name__ == "__main__":
    main()
