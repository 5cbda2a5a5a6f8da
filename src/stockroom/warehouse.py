# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Warehouse manager: seeds two independently keyed stores and walks them
through normal and failing operations.
"""

from __future__ import annotations

from datetime import date, timedelta

from rich.console import Console

from stockroom.config import InventorySettings
from stockroom.errors.result import Failure, Result
from stockroom.inventory import (
    DuplicateItemError,
    ElectronicItem,
    GroceryItem,
    InvalidQuantityError,
    InventoryError,
    InventoryService,
    InventoryStore,
)
from stockroom.inventory.formatting import console as default_console
from stockroom.inventory.formatting import format_failure, format_item
from stockroom.logging import LoggerProtocol, get_logger


class WarehouseManager:
    """Owns an electronics store and a grocery store."""

    def __init__(
        self,
        service: InventoryService | None = None,
        logger: LoggerProtocol | None = None,
        settings: InventorySettings | None = None,
        console: Console | None = None,
        today: date | None = None,
    ) -> None:
        self.logger = logger or get_logger("stockroom.warehouse")
        self.console = console or default_console
        self.settings = settings or InventorySettings.load()
        self.service = service or InventoryService(
            logger=self.logger.bind(component="service"),
            settings=self.settings,
            printer=lambda item: self._say(format_item(item)),
            reporter=self._report,
        )
        self.today = today or date.today()
        self.electronics: InventoryStore[ElectronicItem] = InventoryStore(
            "electronics", logger=self.logger, max_quantity=self.settings.max_quantity
        )
        self.groceries: InventoryStore[GroceryItem] = InventoryStore(
            "groceries", logger=self.logger, max_quantity=self.settings.max_quantity
        )

    def seed_data(self) -> int:
        """Load the sample items; returns how many were added."""
        seeds: list[Result[None, InventoryError]] = [
            self.electronics.add(
                ElectronicItem(
                    id=1, name="Laptop", quantity=5, brand="Acer", warranty_months=24
                )
            ),
            self.electronics.add(
                ElectronicItem(
                    id=2,
                    name="Smartphone",
                    quantity=10,
                    brand="Samsung",
                    warranty_months=12,
                )
            ),
            self.groceries.add(
                GroceryItem(
                    id=101,
                    name="Rice",
                    quantity=50,
                    expiry_date=self.today + timedelta(days=182),
                )
            ),
            self.groceries.add(
                GroceryItem(
                    id=102,
                    name="Milk",
                    quantity=20,
                    expiry_date=self.today + timedelta(days=10),
                )
            ),
        ]
        added = 0
        for result in seeds:
            if isinstance(result, Failure):
                self._say(format_failure("Seed error", result.error))
            else:
                added += 1
        self.logger.info("Seeded warehouse", added=added)
        return added

    def print_all(self) -> None:
        self._say("Grocery items:")
        self.service.print_all(self.groceries)
        self._say("\nElectronic items:")
        self.service.print_all(self.electronics)

    def run(self) -> None:
        """Seed, print, exercise the failure paths, then print again."""
        self.seed_data()
        self.print_all()

        increased = self.service.increase_stock(self.electronics, 1, 3)
        if increased.is_success:
            self._say(f"\nIncreased item 1 to {increased.unwrap().quantity}")

        sugar = GroceryItem(
            id=101,
            name="Sugar",
            quantity=5,
            expiry_date=self.today + timedelta(days=365),
        )
        duplicate = self.groceries.add(sugar)
        match duplicate:
            case Failure(error=DuplicateItemError() as error):
                self._say("\n" + format_failure("Duplicate add caught", error))

        self.service.remove_by_id(self.electronics, 999)

        invalid = self.electronics.update_quantity(1, -10)
        match invalid:
            case Failure(error=InvalidQuantityError() as error):
                self._say("\n" + format_failure("Invalid quantity caught", error))

        self._say("\nFinal inventories:")
        self.print_all()

    def _report(self, message: str, error: InventoryError) -> None:
        self._say(format_failure(message, error))

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)
