"""Rich-powered rendering for journals and product listings."""
from __future__ import annotations

from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from ..catalog.product import Product

_console = Console()


def print_products_table(
    products: Iterable[Product],
    title: str = "Products",
) -> int:
    """Render products as a Rich table, the color column styled by value.

    Returns the number of rows printed.
    """
    rows = list(products)
    if not rows:
        _console.print("[yellow]No products match.[/yellow]")
        return 0

    table = Table(title=title, box=box.ROUNDED, show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Color")
    table.add_column("Size", style="cyan")

    for p in rows:
        table.add_row(p.name, f"[{p.color.value}]{p.color.value}[/{p.color.value}]", p.size.value)

    _console.print(table)
    return len(rows)
