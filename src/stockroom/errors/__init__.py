# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom

"""
Error handling for stockroom.
"""

from __future__ import annotations

from stockroom.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, StockroomError
from stockroom.errors.registry import ErrorRegistry, registry
from stockroom.errors.result import Failure, Result, Success

__all__ = [
    # Codes and categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorRegistry",
    "registry",
    # Base error
    "StockroomError",
    # Result type
    "Result",
    "Success",
    "Failure",
]
