"""Tests for the Result type."""

from unittest.mock import Mock

import pytest
from hypothesis import given, strategies as st

from src.results.errors import ExpectationError, ResultError
from src.results.result import (
    EMPTY,
    PENDING,
    Empty,
    Err,
    Ok,
    Pending,
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


class DomainError(Exception):
    pass


class TestOk:
    def test_is_ok(self) -> None:
        result = Ok(42)
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_status(self) -> None:
        assert Ok(1).status is ResultStatus.SUCCESS

    def test_unwrap(self) -> None:
        result = Ok("hello")
        assert result.unwrap() == "hello"

    def test_unwrap_or(self) -> None:
        result = Ok(42)
        assert result.unwrap_or(0) == 42

    def test_map(self) -> None:
        result = Ok(5)
        mapped = result.map(lambda x: x * 2)
        assert mapped.unwrap() == 10

    def test_map_err_noop(self) -> None:
        result = Ok(5)
        mapped = result.map_err(lambda e: f"error: {e}")
        assert mapped is result

    def test_has_no_error_field(self) -> None:
        with pytest.raises(AttributeError):
            Ok(1).error  # type: ignore[attr-defined]

    def test_immutable(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    @given(st.integers())
    def test_ok_preserves_value(self, value: int) -> None:
        result = Ok(value)
        assert is_ok(result)
        assert not is_err(result)
        assert result.value == value


class TestErr:
    def test_is_err(self) -> None:
        result = Err("something failed")
        assert result.is_err() is True
        assert result.is_ok() is False

    def test_status(self) -> None:
        assert Err("x").status is ResultStatus.ERROR

    def test_unwrap_raises(self) -> None:
        result = Err("fail")
        with pytest.raises(ResultError, match="fail"):
            result.unwrap()

    def test_unwrap_or(self) -> None:
        result = Err("fail")
        assert result.unwrap_or(42) == 42

    def test_map_noop(self) -> None:
        result = Err("fail")
        mapped = result.map(lambda x: x * 2)
        assert mapped is result

    def test_map_err(self) -> None:
        result = Err("fail")
        mapped = result.map_err(lambda e: f"wrapped: {e}")
        assert mapped == Err("wrapped: fail")

    def test_has_no_value_field(self) -> None:
        with pytest.raises(AttributeError):
            Err("x").value  # type: ignore[attr-defined]

    def test_payload_can_be_any_value(self) -> None:
        payload = {"code": 404}
        assert Err(payload).error is payload

    @given(st.text(min_size=1))
    def test_err_preserves_error(self, error: str) -> None:
        result = Err(error)
        assert is_err(result)
        assert not is_ok(result)
        with pytest.raises(ResultError) as exc_info:
            unwrap(result)
        assert exc_info.value.error == error


class TestPendingAndEmpty:
    def test_constructors_return_singletons(self) -> None:
        assert pending() is PENDING
        assert empty() is EMPTY

    def test_status(self) -> None:
        assert pending().status is ResultStatus.PENDING
        assert empty().status is ResultStatus.EMPTY

    def test_neither_ok_nor_err(self) -> None:
        for result in (pending(), empty()):
            assert not is_ok(result)
            assert not is_err(result)
            assert result.is_ok() is False
            assert result.is_err() is False

    def test_predicates(self) -> None:
        assert is_pending(pending())
        assert not is_pending(empty())
        assert is_empty(empty())
        assert not is_empty(pending())

    @pytest.mark.parametrize("result", [Pending(), Empty()])
    def test_unwrap_raises(self, result: object) -> None:
        with pytest.raises(ResultError, match="Cannot unwrap a pending or empty result") as exc_info:
            unwrap(result)  # type: ignore[arg-type]
        assert exc_info.value.result is result
        assert exc_info.value.error is None

    @pytest.mark.parametrize("result", [Pending(), Empty()])
    def test_unwrap_or_returns_default(self, result: object) -> None:
        assert unwrap_or(result, 3) == 3  # type: ignore[arg-type]

    def test_expect_raises(self) -> None:
        with pytest.raises(ExpectationError, match="not ready"):
            expect(pending(), "not ready")


class TestIsResult:
    @pytest.mark.parametrize("value", [Ok(1), Err(1), pending(), empty()])
    def test_results(self, value: object) -> None:
        assert is_result(value)

    @pytest.mark.parametrize("value", [None, 1, "ok", {"status": "success", "value": 1}])
    def test_non_results(self, value: object) -> None:
        assert not is_result(value)
        assert not is_ok(value)  # type: ignore[arg-type]
        assert not is_err(value)  # type: ignore[arg-type]


class TestUnwrap:
    def test_unwrap_value(self) -> None:
        assert unwrap(Ok("123")) == "123"

    def test_exception_payload_message(self) -> None:
        with pytest.raises(ResultError, match="^boom$"):
            unwrap(Err(Exception("boom")))

    def test_non_exception_payload_is_stringified(self) -> None:
        with pytest.raises(ResultError, match="^404$"):
            unwrap(Err(404))

    def test_keeps_original_err(self) -> None:
        original = Err(DomainError("bad"))
        with pytest.raises(ResultError) as exc_info:
            unwrap(original)
        assert exc_info.value.result is original
        assert isinstance(exc_info.value.error, DomainError)

    @given(st.integers(), st.integers())
    def test_unwrap_or(self, value: int, default: int) -> None:
        assert unwrap_or(Ok(value), default) == value
        assert unwrap_or(Err("e"), default) == default


class TestExpect:
    def test_returns_value(self) -> None:
        assert expect(Ok("123"), "another error") == "123"

    def test_string_message(self) -> None:
        with pytest.raises(ExpectationError, match="another error"):
            expect(Err(Exception("some error")), "another error")

    def test_exception_payload_becomes_cause(self) -> None:
        payload = DomainError("some error")
        with pytest.raises(ExpectationError) as exc_info:
            expect(Err(payload), "another error")
        assert exc_info.value.__cause__ is payload

    def test_custom_exception_raised_directly(self) -> None:
        custom = DomainError("custom")
        with pytest.raises(DomainError) as exc_info:
            expect(Err("e"), custom)
        assert exc_info.value is custom

    def test_exception_class(self) -> None:
        with pytest.raises(DomainError):
            expect(Err("e"), DomainError)

    def test_other_values_stringified(self) -> None:
        with pytest.raises(ExpectationError, match="42"):
            expect(Err("e"), 42)


class TestAndThen:
    def test_calls_fn_once_on_ok(self) -> None:
        to_int = Mock(side_effect=lambda value: Ok(int(value)))
        result = and_then(Ok("123"), to_int)
        to_int.assert_called_once_with("123")
        assert result == Ok(123)

    def test_short_circuits_on_err(self) -> None:
        to_int = Mock(side_effect=lambda value: Ok(int(value)))
        original = Err(ValueError("invalid"))
        result = and_then(original, to_int)
        to_int.assert_not_called()
        assert result is original

    @pytest.mark.parametrize("result", [Pending(), Empty()])
    def test_short_circuits_on_unresolved(self, result: object) -> None:
        fn = Mock()
        assert and_then(result, fn) is result  # type: ignore[arg-type]
        fn.assert_not_called()

    def test_method_form(self) -> None:
        assert Ok(2).and_then(lambda x: Ok(x * 3)) == Ok(6)
        original = Err("e")
        assert original.and_then(lambda x: Ok(x)) is original


class TestMapFunctions:
    def test_map_result(self) -> None:
        assert map_result(Ok(2), lambda x: x + 1) == Ok(3)
        original = Err("e")
        assert map_result(original, lambda x: x + 1) is original

    def test_map_err(self) -> None:
        assert map_err(Err("e"), str.upper) == Err("E")
        original = Ok(1)
        assert map_err(original, str.upper) is original


class TestChain:
    @given(st.integers())
    def test_identity_steps(self, value: int) -> None:
        result = chain(Ok(value)).into(lambda x: Ok(x)).into(lambda x: Ok(x)).get()
        assert result == Ok(value)

    def test_steps_in_order(self) -> None:
        result = (
            chain(Ok("4"))
            .into(lambda s: Ok(int(s)))
            .into(lambda n: Ok(n * 10))
            .into(lambda n: Ok(f"{n}!"))
            .get()
        )
        assert result == Ok("40!")

    def test_short_circuit_law(self) -> None:
        first = Mock(side_effect=lambda x: Ok(x + 1))
        failing = Mock(side_effect=lambda x: Err(f"failed at {x}"))
        after = Mock(side_effect=lambda x: Ok(x))

        result = chain(Ok(1)).into(first).into(failing).into(after).into(after).get()

        assert result == Err("failed at 2")
        first.assert_called_once_with(1)
        failing.assert_called_once_with(2)
        after.assert_not_called()

    def test_starting_from_err(self) -> None:
        original = Err("start")
        step = Mock()
        assert chain(original).into(step).into(step).get() is original
        step.assert_not_called()

    def test_map_into(self) -> None:
        steps = [lambda x: Ok(x + 1) for _ in range(10)]
        assert map_into(Ok(0), *steps) == Ok(10)

    def test_map_into_without_steps(self) -> None:
        original = Ok(1)
        assert map_into(original) is original

    def test_map_into_short_circuits(self) -> None:
        after = Mock()
        assert map_into(Ok(1), lambda x: Err("no"), after) == Err("no")
        after.assert_not_called()


class TestFlatten:
    def test_ok_of_ok(self) -> None:
        assert flatten(Ok(Ok(1))) == Ok(1)

    def test_ok_of_err(self) -> None:
        inner = Err("inner")
        assert flatten(Ok(inner)) is inner

    def test_err_of_result(self) -> None:
        inner = Err("inner")
        assert flatten(Err(inner)) is inner

    def test_only_one_level(self) -> None:
        assert flatten(Ok(Ok(Ok(1)))) == Ok(Ok(1))

    @pytest.mark.parametrize("result", [Ok(1), Err("plain"), Pending(), Empty()])
    def test_non_nested_unchanged(self, result: object) -> None:
        assert flatten(result) is result  # type: ignore[arg-type]


class TestCapture:
    def test_plain_value_wrapped(self) -> None:
        assert capture(lambda: 5) == Ok(5)

    def test_returned_result_passes_through(self) -> None:
        original = Err("e")
        assert capture(lambda: original) is original
        assert capture(lambda: Ok(1)) == Ok(1)

    def test_foreign_exception_wrapped(self) -> None:
        def fail() -> int:
            raise DomainError("x")

        result = capture(fail)
        assert is_err(result)
        assert isinstance(result.error, DomainError)
        assert str(result.error) == "x"

    def test_unwrapped_err_recovered(self) -> None:
        original = Err(Exception("some error"))

        def fn_with_error() -> object:
            value1 = unwrap(Ok("123"))
            assert value1 == "123"
            value2 = unwrap(original)
            return Ok(value2)

        result = capture(fn_with_error)
        assert result is original

    @given(st.one_of(st.integers(), st.text(), st.none()))
    def test_pass_through_law(self, payload: object) -> None:
        result = capture(lambda: unwrap(Err(payload)))
        assert result == Err(payload)

    def test_unwrapped_pending_is_wrapped(self) -> None:
        result = capture(lambda: unwrap(pending()))
        assert is_err(result)
        assert isinstance(result.error, ResultError)

    def test_base_exceptions_propagate(self) -> None:
        def interrupt() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            capture(interrupt)


class TestResultError:
    def test_err_payload_exposed(self) -> None:
        original = Err({"code": 1})
        error = ResultError.from_result(original)
        assert error.result is original
        assert error.error == {"code": 1}

    def test_err_with_missing_payload_still_an_err(self) -> None:
        error = ResultError.from_result(Err(None))
        assert str(error) == "None"
        assert error.error is None
        assert capture(lambda: unwrap(Err(None))) == Err(None)

    @pytest.mark.parametrize("result", [Pending(), Empty()])
    def test_non_err_states(self, result: object) -> None:
        error = ResultError.from_result(result)  # type: ignore[arg-type]
        assert str(error) == "Cannot unwrap a pending or empty result"
        assert error.error is None
