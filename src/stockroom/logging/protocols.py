# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom

"""
Logging interface definitions for stockroom.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


class LoggerProtocol(Protocol):
    """
    Interface for loggers used across stockroom.

    Keyword arguments passed to the log methods are emitted as structured
    context alongside the message.
    """

    def debug(self, msg: str, **kwargs: Any) -> None: ...

    def info(self, msg: str, **kwargs: Any) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def error(self, msg: str, **kwargs: Any) -> None: ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger that adds ``kwargs`` to every record."""
        ...

    def context(self, **kwargs: Any) -> AbstractContextManager[None]:
        """Scope ``kwargs`` to the records logged inside a with-block."""
        ...
