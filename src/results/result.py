"""Result type for explicit error handling without exceptions.

Provides a Rust-inspired Result[T, E] with two extra payload-free states:

- Ok(value): the operation succeeded
- Err(error): the operation failed; ``error`` may be any value
- Pending: not resolved yet
- Empty: deliberately nothing, neither a value nor an error

Each variant is its own frozen dataclass tagged with a ``status``. Errors only
become exceptions at the unwrap boundary (``unwrap`` / ``expect``), and
``capture`` turns exceptions back into Results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, TypeGuard, TypeVar, Union

from src.results.errors import ExpectationError, ResultError, describe_payload

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultStatus(str, Enum):
    """Discriminant shared by every Result variant."""

    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T
    status: ClassVar[ResultStatus] = ResultStatus.SUCCESS

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # type: ignore[override]
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:  # type: ignore[type-var]
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], U]) -> Result[T, U]:  # type: ignore[type-var]
        return self  # type: ignore[return-value]

    def and_then(self, fn: Callable[[T], Result[U, F]]) -> Result[U, F]:
        return fn(self.value)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E
    status: ClassVar[ResultStatus] = ResultStatus.ERROR

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise ResultError.from_result(self)

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], U]) -> Result[U, E]:
        return self

    def map_err(self, fn: Callable[[E], U]) -> Result[Any, U]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[Any], Result[U, F]]) -> Result[U, E]:
        return self


class _Unresolved:
    """Behavior shared by the payload-free states."""

    __slots__ = ()

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise ResultError.from_result(self)  # type: ignore[arg-type]

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[Any], Any]) -> Any:
        return self

    def map_err(self, fn: Callable[[Any], Any]) -> Any:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Any:
        return self


@dataclass(frozen=True, slots=True)
class Pending(_Unresolved):
    """Result that has not been resolved yet."""

    status: ClassVar[ResultStatus] = ResultStatus.PENDING


@dataclass(frozen=True, slots=True)
class Empty(_Unresolved):
    """Result that deliberately holds no value and no error."""

    status: ClassVar[ResultStatus] = ResultStatus.EMPTY


PENDING = Pending()
EMPTY = Empty()

Result = Union[Ok[T], Err[E], Pending, Empty]

Mapper = Callable[[T], Result[U, F]]
"""A function that maps a success value to a new result."""


def pending() -> Pending:
    return PENDING


def empty() -> Empty:
    return EMPTY


# Predicates. All of them accept any object and never raise.


def is_result(value: object) -> TypeGuard[Result[Any, Any]]:
    return isinstance(value, (Ok, Err, Pending, Empty))


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)


def is_pending(result: Result[T, E]) -> TypeGuard[Pending]:
    return isinstance(result, Pending)


def is_empty(result: Result[T, E]) -> TypeGuard[Empty]:
    return isinstance(result, Empty)


# Unwrap family


def unwrap(result: Result[T, E]) -> T:
    """Return the Ok value or raise ``ResultError`` carrying the result.

    Example:
        unwrap(Ok(123))                 # 123
        unwrap(Err(ValueError("boom"))) # raises ResultError("boom")
    """
    if isinstance(result, Ok):
        return result.value
    raise ResultError.from_result(result)


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Return the Ok value, or ``default`` for any other state. Never raises."""
    if isinstance(result, Ok):
        return result.value
    return default


def expect(result: Result[T, E], message: Any) -> T:
    """Like ``unwrap`` but fails with a caller-chosen error.

    A string message raises ``ExpectationError(message)``. An exception
    instance or class is raised as is, so callers can fail with their own
    error types. When the Err payload is an exception it becomes the cause.
    """
    if isinstance(result, Ok):
        return result.value

    cause = result.error if isinstance(result, Err) else None
    if not isinstance(cause, BaseException):
        cause = None

    if isinstance(message, str):
        raise ExpectationError(message) from cause
    if isinstance(message, BaseException) or (
        isinstance(message, type) and issubclass(message, BaseException)
    ):
        raise message from cause
    raise ExpectationError(describe_payload(message)) from cause


# Transforms


def and_then(result: Result[T, E], fn: Mapper[T, U, F]) -> Result[U, E | F]:
    """Call ``fn`` with the Ok value; return any other state untouched."""
    if isinstance(result, Ok):
        return fn(result.value)
    return result  # type: ignore[return-value]


def map_result(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """Transform the Ok value with a plain function."""
    return result.map(fn)  # type: ignore[return-value]


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """Transform the Err payload with a plain function."""
    return result.map_err(fn)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class ResultChain(Generic[T, E]):
    """Builder for sequencing any number of Result-returning steps.

    Usage:
        chain(Ok("12")).into(parse_int).into(check_positive).get()

    Once a step produces a non-Ok result the remaining steps are skipped and
    that result is what ``get`` returns.
    """

    result: Result[T, E]

    def into(self, fn: Mapper[T, U, F]) -> ResultChain[U, E | F]:
        return ResultChain(and_then(self.result, fn))

    def get(self) -> Result[T, E]:
        return self.result


def chain(result: Result[T, E]) -> ResultChain[T, E]:
    return ResultChain(result)


def map_into(result: Result[Any, Any], *fns: Mapper[Any, Any, Any]) -> Result[Any, Any]:
    """Function form of ``chain``: apply each step in order, short-circuiting."""
    builder: ResultChain[Any, Any] = chain(result)
    for fn in fns:
        builder = builder.into(fn)
    return builder.get()


def flatten(result: Result[Result[T, E], Any]) -> Result[T, Any]:
    """Collapse one level of nesting on whichever branch is active.

    Precondition: the active payload is itself a Result, e.g.
    ``Ok(Ok(1))`` -> ``Ok(1)`` or ``Err(Err("x"))`` -> ``Err("x")``. When the
    payload is not a Result, or the result is pending/empty, the input is
    returned unchanged. Only one level is removed.
    """
    if isinstance(result, Ok) and is_result(result.value):
        return result.value
    if isinstance(result, Err) and is_result(result.error):
        return result.error
    return result  # type: ignore[return-value]


# Exception boundary


def capture_exception(exc: Exception) -> Err[Any]:
    """Turn a caught exception into an Err.

    A ``ResultError`` raised by unwrapping an Err gives back that same Err;
    anything else is wrapped as the payload of a new one.
    """
    if isinstance(exc, ResultError) and isinstance(exc.result, Err):
        return exc.result
    return Err(exc)


def capture(fn: Callable[[], Union[Result[T, E], T]]) -> Result[T, Any]:
    """Run ``fn`` and always return a Result.

    Plain return values are wrapped in Ok, returned Results pass through, and
    exceptions are converted by ``capture_exception``. This lets the body use
    ``unwrap`` freely while the caller still receives a Result.

    Example:
        def load() -> Result[int, str]:
            raw = unwrap(read_config())
            return Ok(int(raw))

        capture(load)  # Err from read_config, or Err(ValueError) from int()
    """
    try:
        value = fn()
    except Exception as exc:
        return capture_exception(exc)
    if is_result(value):
        return value
    return Ok(value)  # type: ignore[arg-type]
