"""Checkers package - deferred predicates and their combinators.

Checkers capture the value under test at construction and are evaluated
later by :meth:`vala.validation.Validation.validate`.
"""

from .base import CheckResult, Checker, CheckerLike, FunctionChecker, checker, describe_checker, run_checker
from .basic import Equals, GreaterThan, HasLen, IsNotNil, StringNotEmpty
from .combinators import And, Not, Or

__all__ = [
    "And",
    "CheckResult",
    "Checker",
    "CheckerLike",
    "Equals",
    "FunctionChecker",
    "GreaterThan",
    "HasLen",
    "IsNotNil",
    "Not",
    "Or",
    "StringNotEmpty",
    "checker",
    "describe_checker",
    "run_checker",
]
