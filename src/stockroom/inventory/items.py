# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Concrete inventory item variants.

Variants share no base class; each satisfies InventoryItemProtocol on its own.
"""

from __future__ import annotations

from datetime import date
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from stockroom.config import DEFAULT_MAX_QUANTITY


class ElectronicItem(BaseModel):
    """An electronic product with a brand and a warranty period."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    quantity: int = Field(ge=0, le=DEFAULT_MAX_QUANTITY)
    brand: str
    warranty_months: int = Field(ge=0)

    def with_quantity(self, quantity: int) -> Self:
        return self.model_copy(update={"quantity": quantity})


class GroceryItem(BaseModel):
    """A perishable grocery product with an expiry date."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    quantity: int = Field(ge=0, le=DEFAULT_MAX_QUANTITY)
    expiry_date: date

    def with_quantity(self, quantity: int) -> Self:
        return self.model_copy(update={"quantity": quantity})
