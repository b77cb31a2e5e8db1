"""Exceptions raised at the unwrap boundary.

Err payloads are plain values and never raised on their own. When a caller
asserts success with ``unwrap`` or ``expect`` and the assertion fails, the
payload is carried out by one of these exceptions instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.results.result import Result


def describe_payload(payload: Any) -> str:
    """Message for a raised payload: an exception's own message, else ``str()``."""
    if isinstance(payload, BaseException):
        return str(payload)
    return f"{payload}"


class ResultError(Exception):
    """Raised when a non-Ok result is unwrapped.

    Keeps a reference to the offending result so ``capture`` can recover the
    original ``Err`` instead of wrapping this exception in a new one.
    """

    def __init__(self, message: str, result: Result[Any, Any]) -> None:
        super().__init__(message)
        self.result = result

    @property
    def error(self) -> Any:
        """The Err payload, or None for pending and empty results."""
        from src.results.result import Err

        return self.result.error if isinstance(self.result, Err) else None

    @classmethod
    def from_result(cls, result: Result[Any, Any]) -> ResultError:
        from src.results.result import Err

        if isinstance(result, Err):
            return cls(describe_payload(result.error), result)
        return cls("Cannot unwrap a pending or empty result", result)


class ExpectationError(Exception):
    """Raised by ``expect`` when the caller supplied a plain message."""
