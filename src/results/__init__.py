"""Result and Option types with helpers for exceptions and async code."""

from src.results.config import ResultsConfig, use_config
from src.results.errors import ExpectationError, ResultError
from src.results.option import NOTHING, Nothing, Option, Some, is_none, is_some, none
from src.results.promise import next_, then, to, to_capture, to_expect, to_unwrap, to_unwrap_or
from src.results.result import (
    EMPTY,
    PENDING,
    Empty,
    Err,
    Ok,
    Pending,
    Result,
    ResultChain,
    ResultStatus,
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
    map_result,
    pending,
    unwrap,
    unwrap_or,
)

__all__ = [
    "EMPTY",
    "NOTHING",
    "PENDING",
    "Empty",
    "Err",
    "ExpectationError",
    "Nothing",
    "Ok",
    "Option",
    "Pending",
    "Result",
    "ResultChain",
    "ResultError",
    "ResultStatus",
    "ResultsConfig",
    "Some",
    "and_then",
    "capture",
    "chain",
    "empty",
    "expect",
    "flatten",
    "is_empty",
    "is_err",
    "is_none",
    "is_ok",
    "is_pending",
    "is_result",
    "is_some",
    "map_err",
    "map_into",
    "map_result",
    "next_",
    "none",
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
