# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The validation session: a fluent accumulator of checker failures.

.. code-block:: python

    begin_validation().validate(
        IsNotNil(a, "a"),
        IsNotNil(b, "b"),
    ).check_and_abort().validate(  # aborts here if a or b is missing
        HasLen(a.items, 50, "a.items"),
        GreaterThan(b.user_count, 0, "b.user_count"),
        Not(Equals(c.friendly_name, "Foo", "c.friendly_name")),
    ).check()

Checks can be tiered: each ``validate`` call appends to the same session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, NoReturn, Optional, Tuple

from ..checkers.base import CheckerLike, run_checker
from ..exceptions import ValidationAbort, ValidationError
from ..formatting import build_validation_error
from ..telemetry.metrics import check_total, record, validation_abort_total

if TYPE_CHECKING:  # pragma: no cover
    from ..boundary import ErrorSlot

logger = logging.getLogger(__name__)


class Validation:
    """Ordered, append-only list of failure reasons.

    The instance returned by :func:`begin_validation` stands for "no
    session yet": it is shared, never written to, and the first failing
    checker replaces it with a fresh session. Finalizing it, or any
    session without failures, is always a success.
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: List[str] = []

    @property
    def errors(self) -> Tuple[str, ...]:
        """Failure reasons in the order the checkers ran."""

        return tuple(self._errors)

    @property
    def failed(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return self.failed

    def __repr__(self) -> str:
        if self is _NO_VALIDATION:
            return "Validation(<not started>)"
        return f"Validation(errors={self._errors!r})"

    def validate(self, *checkers: CheckerLike) -> "Validation":
        """Run *checkers* in order and collect the reasons of those that fail.

        Every checker runs, whatever its siblings returned. Returns the
        session to keep chaining on, which is a new one if this was the
        "not started" sentinel and something failed.
        """

        session = self
        failures = 0
        for candidate in checkers:
            passed, reason = run_checker(candidate)
            if passed:
                continue
            if session is _NO_VALIDATION:
                session = Validation()
            session._errors.append(reason)
            failures += 1

        record(check_total, len(checkers) - failures, {"outcome": "pass"})
        record(check_total, failures, {"outcome": "fail"})
        logger.debug("Ran %d checker(s), %d failed", len(checkers), failures)
        return session

    def check(self) -> Optional[ValidationError]:
        """Return the aggregated error, or ``None`` when nothing failed."""

        if not self._errors:
            return None
        return build_validation_error(self._errors)

    def check_and_abort(self) -> "Validation":
        """Raise :class:`ValidationAbort` if anything failed, else return self."""

        error = self.check()
        if error is None:
            return self
        self._abort(error)

    def check_set_error_and_abort(self, slot: "ErrorSlot") -> "Validation":
        """Like :meth:`check_and_abort`, but store the error in *slot* first.

        *slot* belongs to the enclosing boundary (see
        :func:`vala.boundary.recover`), which reads the error back out once
        it has caught the abort.
        """

        error = self.check()
        if error is None:
            return self
        slot.error = error
        self._abort(error)

    def _abort(self, error: ValidationError) -> NoReturn:
        record(validation_abort_total)
        logger.debug("Aborting after %d validation failure(s)", len(error.reasons))
        raise ValidationAbort(error)


_NO_VALIDATION = Validation()


def begin_validation() -> Validation:
    """Begin a validation; returns the shared "not started" session."""

    return _NO_VALIDATION


__all__ = ["Validation", "begin_validation"]
