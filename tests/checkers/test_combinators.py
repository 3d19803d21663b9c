# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for Not / Or / And and for user-defined checkers."""

from __future__ import annotations

import pytest

from vala import (
    And,
    CheckResult,
    Checker,
    Equals,
    FunctionChecker,
    GreaterThan,
    HasLen,
    InvalidCheckResultError,
    Not,
    Or,
    StringNotEmpty,
    begin_validation,
    checker,
)


def _counting(passed, reason, calls):
    def _check():
        calls.append(reason)
        return passed, reason
    return _check


# ------------------------------------------------------------------
# Not
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "inner",
    [
        Equals("foo", "foo", "n"),
        Equals("foo", "bar", "n"),
        StringNotEmpty("", "n"),
        GreaterThan(2, 1, "n"),
        HasLen([1], 1, "n"),
    ],
)
def test_not_inverts_outcome(inner):
    assert Not(inner)().passed is not inner().passed


def test_not_wraps_description_of_passing_checker():
    result = Not(Equals("foo", "foo", "varName"))()

    assert result == CheckResult(False, "Not(Parameters were not equal: foo, foo)")


def test_not_drops_reason_on_success():
    assert Not(Equals("foo", "bar", "foo"))() == CheckResult(True, None)


def test_not_prefers_reason_returned_by_plain_callable():
    result = Not(lambda: (True, "user is an admin"))()

    assert result.reason == "Not(user is an admin)"


def test_double_negation():
    assert Not(Not(Equals(1, 1, "n")))().passed is True
    assert Not(Not(Equals(1, 2, "n")))().reason == (
        "Not(Not(Parameters were not equal: 1, 2))"
    )


# ------------------------------------------------------------------
# Or
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "checkers,passes",
    [
        ((HasLen("short", 10, "test"), StringNotEmpty("", "test")), False),
        ((HasLen("1234567890", 10, "test"), StringNotEmpty("", "test")), True),
        ((HasLen("short", 10, "test"), StringNotEmpty("foo", "test")), True),
    ],
)
def test_or(checkers, passes):
    error = begin_validation().validate(Or(*checkers)).check()

    assert (error is None) is passes


def test_or_lists_every_sub_failure_in_order():
    result = Or(HasLen("short", 10, "first"), StringNotEmpty("", "second"))()

    assert result.passed is False
    assert result.reason == (
        "all checks failed:"
        "\n\tParameter did not contain the correct number of elements: first"
        "\n\tParameter is an empty string: second"
    )


def test_or_short_circuits_on_first_pass():
    calls = []

    result = Or(
        _counting(False, "a", calls),
        _counting(True, "b", calls),
        _counting(True, "c", calls),
    )()

    assert result == CheckResult(True, None)
    assert calls == ["a", "b"]


def test_empty_or_fails():
    assert Or()() == CheckResult(False, "all checks failed:")


# ------------------------------------------------------------------
# And
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "checkers,passes",
    [
        ((HasLen("short", 10, "test"), StringNotEmpty("", "test")), False),
        ((HasLen("1234567890", 10, "test"), StringNotEmpty("test", "test")), True),
        ((HasLen("short", 10, "test"), StringNotEmpty("foo", "test")), False),
    ],
)
def test_and(checkers, passes):
    error = begin_validation().validate(And(*checkers)).check()

    assert (error is None) is passes


def test_and_surfaces_only_first_failure_and_short_circuits():
    calls = []

    result = And(
        _counting(True, "a", calls),
        _counting(False, "b", calls),
        _counting(False, "c", calls),
    )()

    assert result == CheckResult(False, "b")
    assert calls == ["a", "b"]


def test_empty_and_passes():
    assert And()().passed is True


def test_checkers_can_be_shared_between_combinators():
    shared = StringNotEmpty("", "name")

    error = begin_validation().validate(
        Or(shared, Equals(1, 2, "n")),
        And(shared),
        Not(shared),
    ).check()

    assert error.reasons[1] == "Parameter is an empty string: name"
    assert len(error.reasons) == 2


# ------------------------------------------------------------------
# Operators and user-defined checkers
# ------------------------------------------------------------------


def test_operators_build_combinators():
    a = Equals(1, 1, "a")
    b = StringNotEmpty("", "b")

    assert isinstance(a & b, And)
    assert isinstance(a | b, Or)
    assert isinstance(~a, Not)
    assert (a & b)() == And(a, b)()
    assert (a | b)() == Or(a, b)()
    assert (~b)().passed is True


def test_chained_operators_flatten():
    a, b, c = Equals(1, 1, "a"), Equals(2, 2, "b"), Equals(3, 4, "c")

    combined = a & b & c

    assert isinstance(combined, And)
    assert len(combined.checkers) == 3
    assert combined().reason == "Parameters were not equal: 3, 4"
    assert len((a | b | c).checkers) == 3


def test_custom_checker_subclass():
    class IsEven(Checker):
        def __init__(self, value, name):
            self.value = value
            self.name = name

        def evaluate(self):
            return self.value % 2 == 0

        def describe(self):
            return f"Parameter was not even: {self.name}"

    assert begin_validation().validate(IsEven(2, "n")).check() is None
    assert str(begin_validation().validate(IsEven(3, "n")).check()) == (
        "parameter validation failed: Parameter was not even: n"
    )
    assert Not(IsEven(2, "n"))().reason == "Not(Parameter was not even: n)"


def test_checker_decorator_builds_deferred_checker():
    calls = []

    @checker
    def author_can_upload(author, allowed):
        calls.append(author)
        return author in allowed, f"{author} does not have access to this repository."

    check = author_can_upload("mallory", allowed={"ada"})

    assert isinstance(check, FunctionChecker)
    assert calls == []
    assert check() == CheckResult(False, "mallory does not have access to this repository.")
    assert author_can_upload("ada", allowed={"ada"})().passed is True


def test_checker_decorator_accepts_bare_bool_predicates():
    @checker
    def is_positive(value):
        return value > 0

    result = is_positive(-1)()

    assert result == CheckResult(False, "Check failed: is_positive(-1)")
    assert (~is_positive(1))().reason == "Not(is_positive(1))"


def test_plain_callable_without_reason_gets_fallback_reason():
    def no_reason():
        return False, None

    error = begin_validation().validate(no_reason).check()

    assert "Check failed:" in str(error)
    assert "no_reason" in str(error)


@pytest.mark.parametrize("outcome", [None, "ok", (True,), (True, "a", "b"), 1])
def test_malformed_checker_outcome_names_the_checker(outcome):
    def returns_garbage():
        return outcome

    with pytest.raises(InvalidCheckResultError) as excinfo:
        begin_validation().validate(returns_garbage)

    assert isinstance(excinfo.value, TypeError)
    assert "returns_garbage" in str(excinfo.value)


def test_malformed_outcome_from_decorated_checker_names_the_function():
    @checker
    def threshold(value):
        return value > 5, "too small", "extra"

    with pytest.raises(InvalidCheckResultError) as excinfo:
        threshold(3)()

    assert excinfo.value.checker == "threshold(3)"
