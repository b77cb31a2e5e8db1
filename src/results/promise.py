"""Bridge between awaitables and Results.

Functions here await coroutines, tasks or futures and convert both outcomes
into Results, so async failures become values instead of exceptions:

    result = await to(fetch_user(user_id))
    if is_err(result):
        ...

``next_`` and ``then`` sequence Result-returning steps the way a promise
chain would, skipping every step after the first failure.

Only ``Exception`` is converted. Cancellation and other ``BaseException``s
propagate untouched.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar, Union

from pydantic import ValidationError

from src.results.config import ResultsConfig, resolve_config
from src.results.errors import ExpectationError
from src.results.result import (
    Err,
    Ok,
    Result,
    capture_exception,
    expect,
    is_result,
    unwrap,
    unwrap_or,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

NextFn = Callable[[T], Union[Result[U, F], Awaitable[Result[U, F]]]]
NextHandle = Callable[[Result[Any, Any]], Awaitable[Result[Any, Any]]]


def _log_failure(config: Optional[ResultsConfig], error: Any, what: str) -> None:
    try:
        config = resolve_config(config)
    except ValidationError:
        logger.debug("Ignoring invalid RESULTS_* settings", exc_info=True)
        return
    if not config.verbose:
        return
    exc_info = error if isinstance(error, BaseException) else None
    logger.log(config.level, "%s: %r", what, error, exc_info=exc_info)


async def to(
    awaitable: Awaitable[T], config: Optional[ResultsConfig] = None
) -> Result[T, Any]:
    """Await and wrap the outcome: Ok(value) on success, Err(exception) on failure.

    Never raises an ``Exception``. A ``ResultError`` from unwrapping an Err
    resolves to that original Err rather than a wrapped one.
    """
    try:
        value = await awaitable
    except Exception as exc:
        _log_failure(config, exc, "Awaitable failed")
        return capture_exception(exc)
    return Ok(value)


def next_(
    next_fn: NextFn[T, U, F],
    message: Optional[str] = None,
    config: Optional[ResultsConfig] = None,
) -> NextHandle:
    """Create a continuation that runs ``next_fn`` on Ok results only.

    ``next_fn`` may be sync or async. When it returns an Err and ``message`` is
    given, the Err is replaced with ``Err(ExpectationError(message))`` and the
    original payload is only logged (verbose mode).

    Usage:
        result = await then(
            to(fetch(url)),
            next_(parse_body),
            next_(validate, "invalid payload"),
        )
    """

    async def handle(result: Result[Any, Any]) -> Result[Any, Any]:
        if not isinstance(result, Ok):
            return result

        next_result = next_fn(result.value)
        if inspect.isawaitable(next_result):
            next_result = await next_result

        if message and isinstance(next_result, Err):
            _log_failure(config, next_result.error, "Step failed")
            return Err(ExpectationError(message))

        return next_result

    return handle


async def then(
    start: Union[Result[Any, Any], Awaitable[Result[Any, Any]]],
    *handlers: Callable[[Result[Any, Any]], Any],
) -> Result[Any, Any]:
    """Run handlers over a result in order, awaiting each before the next."""
    result = await start if inspect.isawaitable(start) else start
    for handler in handlers:
        result = handler(result)
        if inspect.isawaitable(result):
            result = await result
    return result


async def to_capture(
    awaitable: Awaitable[Union[Result[T, E], T]],
    config: Optional[ResultsConfig] = None,
) -> Result[T, Any]:
    """Await something expected to produce a Result, capturing failures.

    A produced Result is returned as is (a plain value is wrapped in Ok).
    Exceptions are converted the same way ``capture`` converts them.
    """
    try:
        value = await awaitable
    except Exception as exc:
        _log_failure(config, exc, "Awaitable failed")
        return capture_exception(exc)
    if is_result(value):
        return value
    return Ok(value)  # type: ignore[arg-type]


async def to_unwrap(
    awaitable: Awaitable[Union[Result[T, E], T]],
    config: Optional[ResultsConfig] = None,
) -> T:
    """Await and unwrap; raises ``ResultError`` with the original error."""
    return unwrap(await to_capture(awaitable, config))


async def to_unwrap_or(
    awaitable: Awaitable[Union[Result[T, E], T]],
    default: T,
    config: Optional[ResultsConfig] = None,
) -> T:
    """Await and return the value, or ``default`` on any failure."""
    return unwrap_or(await to_capture(awaitable, config), default)


async def to_expect(
    awaitable: Awaitable[Union[Result[T, E], T]],
    message: Any,
    config: Optional[ResultsConfig] = None,
) -> T:
    """Await and return the value, failing like ``expect`` with ``message``."""
    return expect(await to_capture(awaitable, config), message)
