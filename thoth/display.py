"""
thoth/display.py — rysowanie DisplayResult w konsoli (rich).

Odpowiednik "embed" z bota: panel z tytułem, opisem i listą pól.
Kolor ramki: niebieski dla wyników, czerwony dla błędów.
"""

from __future__ import annotations

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from rulebook import DisplayResult

console = Console()

STYLE_OK    = "blue"
STYLE_ERROR = "red"


def build_panel(result: DisplayResult) -> Panel:
    style = STYLE_ERROR if result.is_error else STYLE_OK
    parts: list = []

    if result.description:
        parts.append(Text(result.description))

    if result.fields:
        table = Table(box=box.SIMPLE_HEAD, show_header=False, expand=False, padding=(0, 1))
        table.add_column("LABEL", style="bold", no_wrap=True)
        table.add_column("VALUE", no_wrap=False)
        for f in result.fields:
            table.add_row(Text(f.label), Text(f.value))
        parts.append(table)

    return Panel(
        Group(*parts),
        title=Text(result.title, style=f"bold {style}"),
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        expand=False,
    )


def show(result: DisplayResult, out: Console | None = None) -> None:
    (out or console).print(build_panel(result))
