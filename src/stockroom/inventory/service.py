# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Service layer for inventory stores.

The service works on any InventoryStore regardless of item variant and is the
recovery boundary for store failures: every failure is logged, handed to the
reporter and returned, never raised, so a batch of calls keeps going.
"""

from __future__ import annotations

from collections.abc import Callable

from stockroom.config import InventorySettings
from stockroom.errors.result import Failure, Result, Success
from stockroom.inventory.errors import (
    InvalidQuantityError,
    InventoryError,
    ItemNotFoundError,
    QuantityOverflowError,
)
from stockroom.inventory.formatting import print_item, report_failure
from stockroom.inventory.protocols import (
    InventoryItemProtocol,
    InventoryStoreProtocol,
    ItemT,
)
from stockroom.logging import LoggerProtocol, get_logger

ItemPrinter = Callable[[InventoryItemProtocol], None]
FailureReporter = Callable[[str, InventoryError], None]


class InventoryService:
    """
    Variant-agnostic operations over inventory stores.

    Holds no inventory state of its own; the store is passed to each call.
    """

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        settings: InventorySettings | None = None,
        printer: ItemPrinter = print_item,
        reporter: FailureReporter = report_failure,
    ) -> None:
        """
        Initialize the service with its dependencies.

        Args:
            logger: Logger for structured logging
            settings: Inventory settings; loaded from the environment if omitted
            printer: Receives each item from ``print_all``
            reporter: Receives a message and the error for every failure
        """
        self.logger = logger or get_logger("stockroom.inventory.service")
        self.settings = settings or InventorySettings.load()
        self.printer = printer
        self.reporter = reporter

    def print_all(self, store: InventoryStoreProtocol[ItemT]) -> int:
        """Hand every item in ``store`` to the printer.

        Returns:
            The number of items printed
        """
        items = store.get_all()
        for item in items:
            self.printer(item)
        self.logger.debug("Printed store", store=store.name, count=len(items))
        return len(items)

    def increase_stock(
        self, store: InventoryStoreProtocol[ItemT], item_id: int, delta: int
    ) -> Result[ItemT, InventoryError]:
        """Add ``delta`` to the quantity of an item.

        The item is resolved first, then the sum is bounds-checked against
        ``settings.max_quantity``, then written through ``update_quantity``.

        Returns:
            Success with the updated item, or a reported Failure carrying
            ItemNotFoundError, QuantityOverflowError or InvalidQuantityError
        """
        result: Result[ItemT, InventoryError] = (
            store.get_by_id(item_id)
            .flat_map(lambda item: self._checked_total(item, delta))
            .flat_map(lambda total: store.update_quantity(item_id, total))
        )

        match result:
            case Success(value=item):
                self.logger.info(
                    "Increased stock",
                    store=store.name,
                    item_id=item_id,
                    delta=delta,
                    quantity=item.quantity,
                )
            case Failure(error=ItemNotFoundError() as error):
                self._report("Error increasing stock", error, store=store.name)
            case Failure(error=QuantityOverflowError() as error):
                self._report("Error increasing stock", error, store=store.name)
            case Failure(error=InvalidQuantityError() as error):
                self._report("Error increasing stock", error, store=store.name)
            case Failure(error=error):
                self._report("Error increasing stock", error, store=store.name)
        return result

    def remove_by_id(
        self, store: InventoryStoreProtocol[ItemT], item_id: int
    ) -> Result[None, ItemNotFoundError]:
        """Remove an item, reporting a missing id instead of raising."""
        result = store.remove(item_id)
        match result:
            case Success():
                self.logger.info("Removed item", store=store.name, item_id=item_id)
            case Failure(error=ItemNotFoundError() as error):
                self._report("Error removing item", error, store=store.name)
            case Failure(error=error):
                self._report("Error removing item", error, store=store.name)
        return result

    def _checked_total(
        self, item: InventoryItemProtocol, delta: int
    ) -> Result[int, QuantityOverflowError]:
        """Add ``delta`` to the item's quantity within the configured range."""
        current = item.quantity
        total = current + delta
        if total > self.settings.max_quantity:
            limit = self.settings.max_quantity
        elif total < self.settings.min_quantity:
            limit = self.settings.min_quantity
        else:
            return Success(total)
        return Failure(QuantityOverflowError(item.id, current, delta, limit))

    def _report(self, message: str, error: InventoryError, **context: object) -> None:
        fields = {**error.context, **context}
        fields["code"] = error.code.code
        fields["error"] = error.message
        fields["severity"] = error.severity.value
        self.logger.warning(message, **fields)
        if self.settings.report_failures:
            self.reporter(message, error)
