"""Shorthand namespace for the result functions.

    from src.results import r

    value = r.unwrap(r.Ok(123))
    result = await r.then(r.to(fetch()), r.next(parse))

``r.map`` starts a chain and ``r.next`` is ``next_``; both names would shadow
builtins if imported directly, so they only exist on this module.
"""

from src.results.config import ResultsConfig, use_config
from src.results.errors import ExpectationError, ResultError
from src.results.promise import (
    next_,
    then,
    to,
    to_capture,
    to_expect,
    to_unwrap,
    to_unwrap_or,
)
from src.results.result import (
    Empty,
    Err,
    Ok,
    Pending,
    Result,
    and_then,
    capture,
    chain,
    empty,
    expect,
    flatten,
    is_empty,
    is_err,
    is_ok,
    is_pending,
    is_result,
    map_err,
    map_into,
    pending,
    unwrap,
    unwrap_or,
)

map = chain  # noqa: A001
next = next_  # noqa: A001

__all__ = [
    "Empty",
    "Err",
    "ExpectationError",
    "Ok",
    "Pending",
    "Result",
    "ResultError",
    "ResultsConfig",
    "and_then",
    "capture",
    "chain",
    "empty",
    "expect",
    "flatten",
    "is_empty",
    "is_err",
    "is_ok",
    "is_pending",
    "is_result",
    "map",
    "map_err",
    "map_into",
    "next",
    "pending",
    "then",
    "to",
    "to_capture",
    "to_expect",
    "to_unwrap",
    "to_unwrap_or",
    "unwrap",
    "unwrap_or",
    "use_config",
]
