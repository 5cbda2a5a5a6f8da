# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""Inventory store, item contract, failure kinds and service layer."""

from stockroom.inventory.errors import (
    INVENTORY,
    DuplicateItemError,
    InvalidQuantityError,
    InventoryError,
    ItemNotFoundError,
    QuantityOverflowError,
)
from stockroom.inventory.items import ElectronicItem, GroceryItem
from stockroom.inventory.protocols import InventoryItemProtocol, InventoryStoreProtocol
from stockroom.inventory.service import InventoryService
from stockroom.inventory.store import InventoryStore

__all__ = [
    # Contracts
    "InventoryItemProtocol",
    "InventoryStoreProtocol",
    # Variants
    "ElectronicItem",
    "GroceryItem",
    # Store and service
    "InventoryStore",
    "InventoryService",
    # Errors
    "INVENTORY",
    "InventoryError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "InvalidQuantityError",
    "QuantityOverflowError",
]
