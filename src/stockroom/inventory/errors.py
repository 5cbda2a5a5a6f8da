# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
inventory.errors
Inventory store error definitions
"""

from __future__ import annotations

from typing import Any, Final

from stockroom.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    StockroomError,
)

# Define error category and codes
INVENTORY = ErrorCategory.get_or_create("INVENTORY")
INVENTORY_ERROR: Final = ErrorCode.get_or_create("INVENTORY_ERROR", INVENTORY)
INVENTORY_DUPLICATE_ITEM: Final = ErrorCode.get_or_create(
    "INVENTORY_DUPLICATE_ITEM", INVENTORY
)
INVENTORY_ITEM_NOT_FOUND: Final = ErrorCode.get_or_create(
    "INVENTORY_ITEM_NOT_FOUND", INVENTORY
)
INVENTORY_INVALID_QUANTITY: Final = ErrorCode.get_or_create(
    "INVENTORY_INVALID_QUANTITY", INVENTORY
)
INVENTORY_QUANTITY_OVERFLOW: Final = ErrorCode.get_or_create(
    "INVENTORY_QUANTITY_OVERFLOW", INVENTORY
)


class InventoryError(StockroomError):
    """Base class for all inventory store errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = INVENTORY_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize an inventory error.

        Args:
            message: Human-readable error message
            code: Error code
            severity: How severe this error is
            context: Additional context information
            **kwargs: Additional context keys (will be merged with context)
        """
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class DuplicateItemError(InventoryError):
    """An item with the same identifier is already in the store."""

    def __init__(self, item_id: int, **kwargs: Any) -> None:
        self.item_id = item_id
        super().__init__(
            f"Item with ID {item_id} already exists.",
            code=INVENTORY_DUPLICATE_ITEM,
            item_id=item_id,
            **kwargs,
        )


class ItemNotFoundError(InventoryError):
    """No item with the requested identifier is in the store."""

    def __init__(self, item_id: int, **kwargs: Any) -> None:
        self.item_id = item_id
        super().__init__(
            f"Item with ID {item_id} not found.",
            code=INVENTORY_ITEM_NOT_FOUND,
            item_id=item_id,
            **kwargs,
        )


class InvalidQuantityError(InventoryError):
    """A requested quantity is negative or above the store's limit."""

    def __init__(
        self,
        quantity: int,
        item_id: int | None = None,
        limit: int | None = None,
        **kwargs: Any,
    ) -> None:
        self.quantity = quantity
        self.item_id = item_id
        self.limit = limit
        if limit is not None and quantity > limit:
            message = f"Quantity cannot exceed {limit} (got {quantity})."
        else:
            message = f"Quantity cannot be negative (got {quantity})."
        super().__init__(
            message,
            code=INVENTORY_INVALID_QUANTITY,
            severity=ErrorSeverity.WARNING,
            quantity=quantity,
            item_id=item_id,
            limit=limit,
            **kwargs,
        )


class QuantityOverflowError(InventoryError):
    """Adding to a quantity would leave the representable range."""

    def __init__(
        self, item_id: int, current: int, delta: int, limit: int, **kwargs: Any
    ) -> None:
        self.item_id = item_id
        self.current = current
        self.delta = delta
        self.limit = limit
        super().__init__(
            f"Adding {delta} to quantity {current} of item {item_id} "
            f"exceeds the limit of {limit}.",
            code=INVENTORY_QUANTITY_OVERFLOW,
            item_id=item_id,
            current=current,
            delta=delta,
            limit=limit,
            **kwargs,
        )
