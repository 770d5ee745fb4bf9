"""Introspection, unwrapping, and conditional-action tests."""

from __future__ import annotations

import pytest

from resultkit import ExpectError, Result, UnwrapError

pytestmark = pytest.mark.unit


class OrderRejected(Exception):
    """Domain exception used for custom escalation."""


class TestIntrospection:
    @pytest.mark.smoke
    def test_is_success_and_is_failure_are_mutually_exclusive(self) -> None:
        ok = Result.success("value")
        err = Result.failure("error")

        assert ok.is_success() and not ok.is_failure()
        assert err.is_failure() and not err.is_success()


class TestUnwrap:
    def test_unwrap_success_returns_value(self) -> None:
        assert Result.success(3).unwrap_success() == 3

    def test_unwrap_success_on_failure_raises(self) -> None:
        with pytest.raises(UnwrapError) as exc:
            Result.failure("bad").unwrap_success()

        assert exc.value.operation == "unwrap_success"
        assert exc.value.variant == "failure"

    def test_unwrap_failure_returns_error(self) -> None:
        assert Result.failure("bad").unwrap_failure() == "bad"

    def test_unwrap_failure_on_success_raises(self) -> None:
        with pytest.raises(UnwrapError) as exc:
            Result.success(3).unwrap_failure()

        assert exc.value.operation == "unwrap_failure"
        assert exc.value.variant == "success"

    def test_unwrap_success_or(self) -> None:
        assert Result.success(1).unwrap_success_or(9) == 1
        assert Result.failure("x").unwrap_success_or(9) == 9


class TestUnwrapOrRaise:
    def test_success_returns_value(self) -> None:
        assert Result.success(1).unwrap_success_or_raise(OrderRejected("x")) == 1

    def test_raises_given_instance(self) -> None:
        exc = OrderRejected("custom")
        with pytest.raises(OrderRejected) as info:
            Result.failure("out of stock").unwrap_success_or_raise(exc)
        assert info.value is exc

    def test_exception_class_is_called_with_failure_payload(self) -> None:
        with pytest.raises(OrderRejected, match="out of stock"):
            Result.failure("out of stock").unwrap_success_or_raise(OrderRejected)

    def test_factory_is_called_with_failure_payload(self) -> None:
        seen: list[object] = []

        def factory(error: str) -> OrderRejected:
            seen.append(error)
            return OrderRejected(f"rejected: {error}")

        with pytest.raises(OrderRejected, match="rejected: no"):
            Result.failure("no").unwrap_success_or_raise(factory)
        assert seen == ["no"]

    def test_factory_must_build_an_exception(self) -> None:
        with pytest.raises(TypeError, match="expected an exception"):
            Result.failure("no").unwrap_success_or_raise(lambda error: error)


class TestExpect:
    def test_expect_success_returns_value(self) -> None:
        assert Result.success("hello").expect_success("should be ok") == "hello"

    def test_expect_success_on_failure_raises_with_payload(self) -> None:
        with pytest.raises(ExpectError) as exc:
            Result.failure("asdfasdf").expect_success(
                "String should be a valid integer"
            )

        assert str(exc.value) == "String should be a valid integer: asdfasdf"
        assert exc.value.payload == "asdfasdf"
        assert exc.value.variant == "failure"

    def test_expect_failure_returns_error(self) -> None:
        assert Result.failure("asdf").expect_failure("should be error") == "asdf"

    def test_expect_failure_on_success_raises_with_payload(self) -> None:
        with pytest.raises(ExpectError) as exc:
            Result.success("hello").expect_failure("Result should be error")

        assert str(exc.value) == "Result should be error: hello"
        assert exc.value.operation == "expect_failure"


class TestOptionals:
    def test_to_optional(self) -> None:
        assert Result.success("thing").to_optional() == "thing"
        assert Result.failure("uh oh").to_optional() is None

    def test_to_failure_optional(self) -> None:
        assert Result.success("ok").to_failure_optional() is None
        assert Result.failure("this is an error").to_failure_optional() == (
            "this is an error"
        )


class TestConditionalActions:
    def test_on_success_runs_only_for_success(self) -> None:
        seen: list[object] = []
        Result.success(1).on_success(seen.append)
        Result.failure(2).on_success(seen.append)
        assert seen == [1]

    def test_on_failure_runs_only_for_failure(self) -> None:
        seen: list[object] = []
        Result.success(1).on_failure(seen.append)
        Result.failure(2).on_failure(seen.append)
        assert seen == [2]

    def test_match_dispatches_exactly_one_action(self) -> None:
        seen: list[str] = []

        assert (
            Result.success("world").match(
                lambda v: seen.append(f"hello {v}"),
                lambda e: seen.append("I got an error"),
            )
            is None
        )
        Result.failure("uh oh!").match(
            lambda v: seen.append(f"hello {v}"),
            lambda e: seen.append("I got an error"),
        )

        assert seen == ["hello world", "I got an error"]

    def test_match_result_returns_branch_value(self) -> None:
        assert Result.success("bob").match_result(len, lambda e: 8) == 3
        assert Result.failure("hello").match_result(len, lambda e: 2) == 2
