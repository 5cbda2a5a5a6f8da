# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Console formatting of inventory items and failures.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from stockroom.inventory.errors import InventoryError
from stockroom.inventory.items import ElectronicItem, GroceryItem
from stockroom.inventory.protocols import InventoryItemProtocol

console = Console()


def format_item(item: InventoryItemProtocol) -> str:
    """Render an item as a single line of text."""
    match item:
        case ElectronicItem():
            return (
                f"[E] {item.id} - {item.name} ({item.brand}) "
                f"Qty: {item.quantity} Warranty: {item.warranty_months}mo"
            )
        case GroceryItem():
            return (
                f"[G] {item.id} - {item.name} "
                f"Qty: {item.quantity} Expiry: {item.expiry_date.isoformat()}"
            )
        case _:
            return f"{item.id} - {item.name} Qty: {item.quantity}"


def format_failure(message: str, error: InventoryError) -> str:
    return f"{message}: {error.message}"


def print_item(item: InventoryItemProtocol) -> None:
    # markup off: the "[E]"/"[G]" prefixes would otherwise be read as rich tags
    console.print(format_item(item), markup=False, highlight=False)


def report_failure(message: str, error: InventoryError) -> None:
    console.print(format_failure(message, error), style="red", markup=False)


def item_rows(items: Iterable[InventoryItemProtocol]) -> list[list[str]]:
    """Build table rows of id, name, quantity and variant details."""
    rows = []
    for item in sorted(items, key=lambda i: i.id):
        match item:
            case ElectronicItem():
                details = f"{item.brand}, {item.warranty_months}mo warranty"
            case GroceryItem():
                details = f"expires {item.expiry_date.isoformat()}"
            case _:
                details = ""
        rows.append([str(item.id), item.name, str(item.quantity), details])
    return rows


def display_items(
    items: Iterable[InventoryItemProtocol],
    title: str | None = None,
    target: Console | None = None,
) -> None:
    """Display items as a rich table.

    Args:
        items: Items to show
        title: Optional table title
        target: Console to print to; defaults to the module console
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for header in ("ID", "Name", "Quantity", "Details"):
        table.add_column(header, overflow="fold")
    for row in item_rows(items):
        table.add_row(*row)
    (target or console).print(table)
