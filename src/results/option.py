"""Option type: a value that may be absent.

``Some(value)`` holds a value, ``Nothing`` holds none. Python's ``None`` is a
keyword, so the absent variant is ``Nothing`` and its constructor ``none()``.

Unwrapping ``Nothing`` raises ``ResultError`` carrying an ``Err``, so code
wrapped in ``capture`` gets that Err back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeGuard, TypeVar, Union

from src.results.errors import ResultError
from src.results.result import Err

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """Option holding a value."""

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Nothing:
    """Option holding no value."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return unwrap(self)

    def unwrap_or(self, default: T) -> T:
        return default


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def none() -> Nothing:
    return NOTHING


def from_optional(value: Optional[T]) -> Option[T]:
    """``Some(value)``, or ``none()`` when value is None."""
    if value is None:
        return NOTHING
    return Some(value)


def is_some(option: Option[T]) -> TypeGuard[Some[T]]:
    return isinstance(option, Some)


def is_none(option: Option[T]) -> TypeGuard[Nothing]:
    return isinstance(option, Nothing)


def _none_error(message: str) -> ResultError:
    return ResultError(message, Err(message))


def unwrap(option: Option[T]) -> T:
    """Return the value of a Some, or raise for Nothing.

    Example:
        unwrap(Some(123))  # 123
        unwrap(none())     # raises ResultError("Tried to unwrap a None option")
    """
    if isinstance(option, Some):
        return option.value
    raise _none_error("Tried to unwrap a None option")


def unwrap_or(option: Option[T], default: T) -> T:
    if isinstance(option, Some):
        return option.value
    return default


def expect_some(option: Option[T]) -> T:
    if isinstance(option, Some):
        return option.value
    raise _none_error("Expected a Some option")
