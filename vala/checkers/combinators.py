# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Combinators that wrap other checkers without knowing what they check."""

from __future__ import annotations

from typing import List, Tuple

from ..formatting import ALL_CHECKS_FAILED, indent_reasons
from .base import CheckResult, Checker, CheckerLike, describe_checker, run_checker


class Not(Checker):
    """Invert a checker.

    When the wrapped checker passes, ``Not`` fails with ``Not(<reason>)``;
    when it fails, ``Not`` passes and its reason is dropped.
    """

    __slots__ = ("checker",)

    def __init__(self, checker: CheckerLike):
        self.checker = checker

    def __call__(self) -> CheckResult:
        result = run_checker(self.checker)
        if result.passed:
            return CheckResult(False, f"Not({result.reason or describe_checker(self.checker)})")
        return CheckResult(True)

    def evaluate(self) -> bool:
        return self().passed

    def describe(self) -> str:
        return f"Not({describe_checker(self.checker)})"

    def __repr__(self) -> str:
        return f"Not({self.checker!r})"


class Or(Checker):
    """Pass as soon as one checker passes.

    Checkers run in order and evaluation stops at the first pass. When all
    of them fail the reason lists every sub-failure, one per line.
    ``Or()`` with nothing to try fails.
    """

    __slots__ = ("checkers",)

    def __init__(self, *checkers: CheckerLike):
        self.checkers: Tuple[CheckerLike, ...] = checkers

    def __call__(self) -> CheckResult:
        reasons: List[str] = []
        for candidate in self.checkers:
            result = run_checker(candidate)
            if result.passed:
                return CheckResult(True)
            reasons.append(result.reason)
        return CheckResult(False, indent_reasons(ALL_CHECKS_FAILED, reasons))

    def evaluate(self) -> bool:
        return self().passed

    def describe(self) -> str:
        return f"Or({', '.join(describe_checker(c) for c in self.checkers)})"

    def __or__(self, other: CheckerLike) -> "Or":
        return Or(*self.checkers, other)

    def __repr__(self) -> str:
        return f"Or({', '.join(repr(c) for c in self.checkers)})"


class And(Checker):
    """Pass only if every checker passes.

    Checkers run in order and evaluation stops at the first failure, whose
    reason becomes the reason of the whole ``And``.
    """

    __slots__ = ("checkers",)

    def __init__(self, *checkers: CheckerLike):
        self.checkers: Tuple[CheckerLike, ...] = checkers

    def __call__(self) -> CheckResult:
        for candidate in self.checkers:
            result = run_checker(candidate)
            if not result.passed:
                return result
        return CheckResult(True)

    def evaluate(self) -> bool:
        return self().passed

    def describe(self) -> str:
        return f"And({', '.join(describe_checker(c) for c in self.checkers)})"

    def __and__(self, other: CheckerLike) -> "And":
        return And(*self.checkers, other)

    def __repr__(self) -> str:
        return f"And({', '.join(repr(c) for c in self.checkers)})"


__all__ = ["And", "Not", "Or"]
