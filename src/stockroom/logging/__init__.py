# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom

"""
Public API for the stockroom logging system.
"""

from __future__ import annotations

from stockroom.logging.config import LoggingSettings, LogLevel
from stockroom.logging.logger import StockroomLogger, StructuredFormatter, get_logger
from stockroom.logging.protocols import LoggerProtocol

__all__ = [
    "LoggerProtocol",
    "LogLevel",
    "LoggingSettings",
    "StockroomLogger",
    "StructuredFormatter",
    "get_logger",
]
