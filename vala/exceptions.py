# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for vala."""

from __future__ import annotations

from typing import Iterable, Tuple


class ValaError(Exception):
    """Base class for every error raised by vala."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(ValaError):
    """Aggregated failure of one or more checkers.

    Returned (not raised) by :meth:`Validation.check`, and carried as the
    payload of :class:`ValidationAbort` on the aborting paths. ``reasons``
    preserves the order in which the failing checkers were run.
    """

    def __init__(self, message: str, reasons: Iterable[str] = ()):
        super().__init__(message)
        self.reasons: Tuple[str, ...] = tuple(reasons)

    def __repr__(self) -> str:
        return f"ValidationError({self.message!r})"


class ValidationAbort(ValaError):
    """Fatal signal raised by the aborting finalizers.

    The text of the abort is exactly the text of ``error``, the
    :class:`ValidationError` that :meth:`Validation.check` would have
    returned for the same session.
    """

    def __init__(self, error: ValidationError):
        super().__init__(error.message)
        self.error = error


class UncheckableTypeError(ValaError, TypeError):
    """A checker was asked about a value it has no defined semantics for.

    This is programmer misuse, not a data-driven failure: it is raised as
    soon as the checker runs and is never collected into a session.
    """

    def __init__(self, checker: str, value: object, capability: str):
        self.checker = checker
        self.value_type = type(value).__name__
        super().__init__(
            f"{checker} is unable to check values of type '{self.value_type}' for {capability}."
        )


class InvalidCheckResultError(ValaError, TypeError):
    """A checker returned something other than a bool or a ``(passed, reason)`` pair."""

    def __init__(self, checker: str, outcome: object):
        self.checker = checker
        self.outcome = outcome
        super().__init__(
            f"Checker {checker} must return a bool or a (passed, reason) pair, got {outcome!r}"
        )


class ConfigurationError(ValaError):
    """Raised when a ``VALA_*`` environment variable holds an invalid value."""


__all__ = [
    "ConfigurationError",
    "InvalidCheckResultError",
    "UncheckableTypeError",
    "ValaError",
    "ValidationAbort",
    "ValidationError",
]
