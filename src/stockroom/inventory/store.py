# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
In-memory typed inventory store.

One store holds one item variant. Identifiers are unique within a store only,
so an electronics store and a grocery store are independently keyed.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic

from stockroom.config import DEFAULT_MAX_QUANTITY
from stockroom.errors.result import Failure, Result, Success
from stockroom.inventory.errors import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from stockroom.inventory.protocols import ItemT
from stockroom.logging import LoggerProtocol, get_logger


class InventoryStore(Generic[ItemT]):
    """Keyed collection of one item variant.

    Every operation returns a Result; nothing is raised for duplicate,
    missing or invalid input. Stored quantities always lie between zero and
    ``max_quantity``. The store is not thread-safe: callers sharing a store
    across threads must serialize access themselves.
    """

    def __init__(
        self,
        name: str = "inventory",
        logger: LoggerProtocol | None = None,
        max_quantity: int = DEFAULT_MAX_QUANTITY,
    ) -> None:
        """Initialize an empty store.

        Args:
            name: Label used in log records, e.g. ``"electronics"``
            logger: Optional logger; a default one is created if omitted
            max_quantity: Largest quantity an item in this store may hold
        """
        self.name = name
        self.max_quantity = max_quantity
        self._items: dict[int, ItemT] = {}
        self._logger = (logger or get_logger(f"stockroom.store.{name}")).bind(
            store=name
        )

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[ItemT]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, size={len(self._items)})"

    def add(
        self, item: ItemT
    ) -> Result[None, DuplicateItemError | InvalidQuantityError]:
        """Insert ``item`` under its own identifier.

        Returns:
            Success(None), Failure(DuplicateItemError) if the id is taken, or
            Failure(InvalidQuantityError) if the item holds more than
            ``max_quantity``. The store is unchanged on failure.
        """
        if item.id in self._items:
            self._logger.warning("Duplicate item rejected", item_id=item.id)
            return Failure(DuplicateItemError(item.id, store=self.name))
        if item.quantity > self.max_quantity:
            self._logger.warning(
                "Item quantity above limit rejected",
                item_id=item.id,
                quantity=item.quantity,
                limit=self.max_quantity,
            )
            return Failure(
                InvalidQuantityError(
                    item.quantity,
                    item_id=item.id,
                    limit=self.max_quantity,
                    store=self.name,
                )
            )
        self._items[item.id] = item
        self._logger.debug("Item added", item_id=item.id, quantity=item.quantity)
        return Success(None)

    def get_by_id(self, item_id: int) -> Result[ItemT, ItemNotFoundError]:
        """Look up an item.

        The returned item is immutable, so handing out the stored instance
        cannot change the store.
        """
        item = self._items.get(item_id)
        if item is None:
            self._logger.debug("Item not found", item_id=item_id)
            return Failure(ItemNotFoundError(item_id, store=self.name))
        return Success(item)

    def remove(self, item_id: int) -> Result[None, ItemNotFoundError]:
        """Delete the entry for ``item_id``."""
        if self._items.pop(item_id, None) is None:
            self._logger.warning("Cannot remove missing item", item_id=item_id)
            return Failure(ItemNotFoundError(item_id, store=self.name))
        self._logger.info("Item removed", item_id=item_id)
        return Success(None)

    def get_all(self) -> list[ItemT]:
        """Return a snapshot list of every item; order is not significant."""
        return list(self._items.values())

    def update_quantity(
        self, item_id: int, new_quantity: int
    ) -> Result[ItemT, InvalidQuantityError | ItemNotFoundError]:
        """Replace the quantity of an existing item.

        The quantity is range-checked before the identifier is resolved, so a
        negative quantity for a missing id yields InvalidQuantityError.

        Returns:
            Success with the updated item, or Failure(InvalidQuantityError)
            or Failure(ItemNotFoundError)
        """
        if new_quantity < 0 or new_quantity > self.max_quantity:
            self._logger.warning(
                "Quantity out of range rejected",
                item_id=item_id,
                quantity=new_quantity,
                limit=self.max_quantity,
            )
            return Failure(
                InvalidQuantityError(
                    new_quantity,
                    item_id=item_id,
                    limit=self.max_quantity,
                    store=self.name,
                )
            )

        current = self._items.get(item_id)
        if current is None:
            self._logger.warning("Cannot update missing item", item_id=item_id)
            return Failure(ItemNotFoundError(item_id, store=self.name))

        updated = current.with_quantity(new_quantity)
        self._items[item_id] = updated
        self._logger.info(
            "Quantity updated",
            item_id=item_id,
            previous=current.quantity,
            quantity=new_quantity,
        )
        return Success(updated)
