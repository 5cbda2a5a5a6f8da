# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Result objects for functional error handling in stockroom.

Store operations return a Result instead of raising, so callers inspect the
outcome (``is_failure``, ``match``) rather than unwinding the stack.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


class Result(Generic[T, E], ABC):
    """Outcome of an operation: a ``Success`` value or a ``Failure`` error."""

    @property
    @abstractmethod
    def is_success(self) -> bool: ...

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @abstractmethod
    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a step that itself returns a Result; failures pass through."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value, raising RuntimeError for a failure."""


@dataclass(frozen=True)
class Success(Result[T, E], Generic[T, E]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Result[T, E], Generic[T, E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def flat_map(self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return cast("Failure[U, E]", self)

    def unwrap(self) -> T:
        raise RuntimeError(f"Cannot unwrap a Failure: {self.error}") from self.error
