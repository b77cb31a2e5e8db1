"""Shorthand namespace for the option functions.

    from src.results import o

    o.unwrap_or(o.none(), 10)  # 10
"""

from src.results.option import (
    Nothing,
    Option,
    Some,
    expect_some,
    from_optional,
    is_none,
    is_some,
    none,
    unwrap,
    unwrap_or,
)

__all__ = [
    "Nothing",
    "Option",
    "Some",
    "expect_some",
    "from_optional",
    "is_none",
    "is_some",
    "none",
    "unwrap",
    "unwrap_or",
]
