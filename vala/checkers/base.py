# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Checker protocol shared by the built-in checkers and combinators.

A checker is a deferred predicate: a zero-argument callable returning
``(passed, reason)``. Built-in checkers derive from :class:`Checker`,
which composes with ``&``, ``|`` and ``~``. Any other callable with the
same shape is accepted wherever a checker is expected, so application
code can write its own without subclassing::

    def report_fits_repository(report, repository):
        def _check():
            return (
                report.type == repository.type,
                f"A {report.type} report does not belong in a {repository.type} repository.",
            )
        return _check

The :func:`checker` decorator does the same wrapping for a plain
predicate function and returns a composable :class:`Checker`.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Mapping, NamedTuple, Optional, Tuple, Union

from ..exceptions import InvalidCheckResultError

if TYPE_CHECKING:  # pragma: no cover
    from .combinators import And, Not, Or


class CheckResult(NamedTuple):
    """Outcome of running one checker.

    ``reason`` is only guaranteed on failure; successful checks usually
    leave it unset because success reasons are never surfaced.
    """

    passed: bool
    reason: Optional[str] = None


CheckerLike = Union["Checker", Callable[[], Tuple[bool, Any]]]


class Checker(ABC):
    """Base class for immutable, reusable deferred predicates."""

    __slots__ = ()

    @abstractmethod
    def evaluate(self) -> bool:
        """Return whether the captured arguments satisfy the check."""

    @abstractmethod
    def describe(self) -> str:
        """Return the human-readable failure description."""

    def __call__(self) -> CheckResult:
        if self.evaluate():
            return CheckResult(True)
        return CheckResult(False, self.describe())

    def __and__(self, other: CheckerLike) -> "And":
        from .combinators import And

        return And(self, other)

    def __or__(self, other: CheckerLike) -> "Or":
        from .combinators import Or

        return Or(self, other)

    def __invert__(self) -> "Not":
        from .combinators import Not

        return Not(self)


def describe_checker(candidate: CheckerLike) -> str:
    """Best available description of *candidate*, used when negating it."""

    if isinstance(candidate, Checker):
        return candidate.describe()
    return repr(candidate)


def run_checker(candidate: CheckerLike) -> CheckResult:
    """Run *candidate* and normalise its outcome into a :class:`CheckResult`.

    Failed checks always come back with a reason: when a plain callable
    fails without giving one, the callable's repr stands in.
    """

    if isinstance(candidate, Checker):
        return candidate()
    return _normalise(candidate(), lambda: repr(candidate))


def _normalise(outcome: Any, fallback: Callable[[], str]) -> CheckResult:
    if isinstance(outcome, bool):
        passed, reason = outcome, None
    elif isinstance(outcome, (tuple, list)) and len(outcome) == 2:
        passed, reason = outcome
    else:
        raise InvalidCheckResultError(fallback(), outcome)

    if passed:
        return CheckResult(True, None if reason is None else str(reason))
    if reason is None:
        reason = f"Check failed: {fallback()}"
    return CheckResult(False, str(reason))


class FunctionChecker(Checker):
    """Adapt a plain predicate function and its arguments into a checker.

    The function may return a bare ``bool`` or a ``(passed, reason)`` pair.
    """

    __slots__ = ("func", "args", "kwargs")

    def __init__(self, func: Callable[..., Any], *args: Any, **kwargs: Any):
        self.func = func
        self.args: Tuple[Any, ...] = args
        self.kwargs: Mapping[str, Any] = kwargs

    def __call__(self) -> CheckResult:
        return _normalise(self.func(*self.args, **self.kwargs), self.describe)

    def evaluate(self) -> bool:
        return self().passed

    def describe(self) -> str:
        parts = [repr(a) for a in self.args]
        parts.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        return f"{self.func.__name__}({', '.join(parts)})"

    def __repr__(self) -> str:
        return f"FunctionChecker({self.describe()})"


def checker(func: Callable[..., Any]) -> Callable[..., FunctionChecker]:
    """Turn a predicate function into a checker factory.

    .. code-block:: python

        @checker
        def author_can_upload(author, repository):
            return repository.can_upload(author), f"{author} does not have access to this repository."

        begin_validation().validate(author_can_upload("ada", repo)).check_and_abort()
    """

    @functools.wraps(func)
    def factory(*args: Any, **kwargs: Any) -> FunctionChecker:
        return FunctionChecker(func, *args, **kwargs)

    return factory


__all__ = [
    "CheckResult",
    "Checker",
    "CheckerLike",
    "FunctionChecker",
    "checker",
    "describe_checker",
    "run_checker",
]
