# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Base error classes for stockroom.

Errors carry a registered ErrorCode (which knows its ErrorCategory), a
severity and a context dictionary, so that callers can discriminate failures
programmatically rather than by message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from stockroom.errors.registry import registry


class ErrorSeverity(str, Enum):
    """Severity levels for errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ErrorCategory:
    """Named group of related error codes, e.g. ``INVENTORY``."""

    def __init__(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCategory):
            return False
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    @classmethod
    def get_or_create(cls, name: str) -> ErrorCategory:
        return registry.category(name)


class ErrorCode:
    """Error code bound to a category."""

    def __init__(self, code: str, category: ErrorCategory) -> None:
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Get or create an error code."""
        return registry.code(name, category)


class StockroomError(Exception):
    """
    Base error class for stockroom errors.
    Should only be subclassed for package-specific errors, not instantiated directly.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]

    def __new__(cls, *args: Any, **kwargs: Any) -> StockroomError:
        if cls is StockroomError:
            raise TypeError(
                "StockroomError is abstract; raise one of its subclasses instead."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new error (never instantiate StockroomError directly).

        Args:
            message: Human-readable error message
            code: ErrorCode object containing the code and category
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys, merged into ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = {**(context or {}), **kwargs}

    def __str__(self) -> str:
        """String in format 'code: message'."""
        return f"{self.code}: {self.message}"
