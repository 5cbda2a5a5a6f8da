# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Logging configuration for stockroom.

Settings are read from ``STOCKROOM_LOGGING_*`` environment variables; level
names are case-insensitive.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Level names accepted by settings and the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingSettings(BaseSettings):
    """Where and how stockroom loggers write their records."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Minimum record level")
    json_format: bool = Field(default=False, description="One JSON object per line")
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = Field(default=True, description="Write records to stdout")
    file_enabled: bool = False
    file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
