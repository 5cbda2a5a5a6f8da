# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Structured logger for stockroom.

Records go through the standard ``logging`` module; keyword arguments given
to the log methods travel on the record and are rendered by
``StructuredFormatter`` as ``key=value`` pairs or as JSON fields.
"""

from __future__ import annotations

import contextlib
import copy
import datetime
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

from stockroom.logging.config import LoggingSettings
from stockroom.logging.protocols import LoggerProtocol

if TYPE_CHECKING:
    from collections.abc import Generator

# LogRecord attribute holding the structured context of a record
CONTEXT_ATTR = "stockroom_context"


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (datetime.datetime, datetime.date)):
        return obj.isoformat()
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formatter that appends the record's context to the message."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt
        if include_level and not json_format:
            fmt = fmt + " [%(levelname)s]"

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        extra: dict[str, Any] = dict(getattr(record, CONTEXT_ATTR, None) or {})
        if self.json_format:
            return self._format_json(record, extra)
        message = super().format(record)
        if not extra:
            return message
        pairs = " ".join(f"{k}={self._format_value(v)}" for k, v in extra.items())
        return f"{message} {pairs}"

    def _format_json(self, record: logging.LogRecord, extra: dict[str, Any]) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **extra,
        }
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=_json_default, ensure_ascii=False)

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain spaces
            return f'"{value}"' if " " in value else value
        try:
            return json.dumps(value, default=_json_default)
        except (TypeError, ValueError):
            return str(value)


class StockroomLogger(LoggerProtocol):
    """Default logger implementation for stockroom."""

    def __init__(self, name: str, settings: LoggingSettings | None = None) -> None:
        """
        Initialize a logger and (re)configure the stdlib logger of that name.

        Args:
            name: Logger name
            settings: Optional logger settings (loads from environment if None)
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._configure()

        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

    def _configure(self) -> None:
        self._logger.setLevel(self._settings.level.value)

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
            include_level=self._settings.include_level,
        )

        if self._settings.console_enabled:
            console = logging.StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(self._settings.file_path)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        self._logger.propagate = False

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        exc_info = kwargs.pop("exc_info", None)
        combined_context = {**self._bound_context, **self._context, **kwargs}
        self._logger.log(
            level, msg, exc_info=exc_info, extra={CONTEXT_ATTR: combined_context}
        )

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, **kwargs)

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """
        Context manager for adding contextual information to log messages.

        Args:
            **kwargs: Context key-value pairs to add to log messages
        """
        original_context = self._context.copy()
        self._context.update(kwargs)
        try:
            yield
        finally:
            self._context = original_context

    def bind(self, **kwargs: Any) -> StockroomLogger:
        """Return a logger sharing this one's handlers with extra bound context."""
        logger = copy.copy(self)
        logger._bound_context = {**self._bound_context, **kwargs}
        logger._context = {}
        return logger


def get_logger(name: str, settings: LoggingSettings | None = None) -> StockroomLogger:
    """Get a logger for the specified name.

    Args:
        name: Logger name (typically __name__)
        settings: Optional settings; loaded from the environment if omitted

    Returns:
        Configured logger instance
    """
    return StockroomLogger(name, settings=settings)
