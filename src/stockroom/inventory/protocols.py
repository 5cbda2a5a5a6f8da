# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
inventory.protocols
Structural contracts for inventory items and the stores that hold them
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from stockroom.errors.result import Result
    from stockroom.inventory.errors import (
        DuplicateItemError,
        InvalidQuantityError,
        ItemNotFoundError,
    )


@runtime_checkable
class InventoryItemProtocol(Protocol):
    """Minimal field set any inventory entry exposes to a store.

    Identifier and name never change. The quantity only changes through a
    store, which swaps the entry for ``with_quantity(...)``.
    """

    @property
    def id(self) -> int: ...

    @property
    def name(self) -> str: ...

    @property
    def quantity(self) -> int: ...

    def with_quantity(self, quantity: int) -> Self:
        """Return a copy of this item holding ``quantity``."""
        ...


ItemT = TypeVar("ItemT", bound=InventoryItemProtocol)


class InventoryStoreProtocol(Protocol[ItemT]):
    """Keyed, uniquely indexed collection of one item variant."""

    name: str

    def add(
        self, item: ItemT
    ) -> Result[None, DuplicateItemError | InvalidQuantityError]: ...

    def get_by_id(self, item_id: int) -> Result[ItemT, ItemNotFoundError]: ...

    def remove(self, item_id: int) -> Result[None, ItemNotFoundError]: ...

    def get_all(self) -> list[ItemT]: ...

    def update_quantity(
        self, item_id: int, new_quantity: int
    ) -> Result[ItemT, InvalidQuantityError | ItemNotFoundError]: ...
