# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""Process-wide registry of error categories and codes."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockroom.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton holding one ErrorCategory per name and one ErrorCode per
    ``CATEGORY.CODE`` key, so repeated declarations resolve to the same object.
    """

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def category(self, name: str) -> ErrorCategory:
        """Return the category called ``name``, creating it on first use."""
        from stockroom.errors.base import ErrorCategory

        with self._lock:
            if name not in self._categories:
                self._categories[name] = ErrorCategory(name)
            return self._categories[name]

    def code(self, code: str, category: ErrorCategory) -> ErrorCode:
        """Return ``code`` within ``category``, creating it on first use."""
        from stockroom.errors.base import ErrorCode

        key = f"{category.name}.{code}"
        with self._lock:
            if key not in self._codes:
                self._codes[key] = ErrorCode(code, self.category(category.name))
            return self._codes[key]


registry = ErrorRegistry()
