# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""Configuration for stockroom applications."""

from stockroom.config.settings import DEFAULT_MAX_QUANTITY, InventorySettings
from stockroom.logging.config import LoggingSettings

__all__ = ["DEFAULT_MAX_QUANTITY", "InventorySettings", "LoggingSettings"]
