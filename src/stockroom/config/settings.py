# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Inventory configuration.

This module provides configuration settings for the inventory store and its
service layer, loaded from ``STOCKROOM_INVENTORY_*`` environment variables.
"""

from __future__ import annotations

from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest value of a 32-bit signed integer
DEFAULT_MAX_QUANTITY: Final = 2**31 - 1


class InventorySettings(BaseSettings):
    """Configuration settings for the inventory module."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_INVENTORY_",
        extra="ignore",
        case_sensitive=False,
    )

    max_quantity: int = Field(
        default=DEFAULT_MAX_QUANTITY,
        gt=0,
        description="Largest quantity an item may hold; sums beyond it overflow",
    )

    report_failures: bool = Field(
        default=True,
        description="Whether the service hands failures to its reporter",
    )

    @property
    def min_quantity(self) -> int:
        """Smallest representable intermediate quantity (two's complement bound)."""
        return -(self.max_quantity + 1)

    @classmethod
    def load(cls) -> InventorySettings:
        """Load inventory settings from environment variables or defaults."""
        return cls()
