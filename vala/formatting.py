"""Rendering of failure reasons into error text."""

from __future__ import annotations

from typing import Sequence

from .exceptions import ValidationError

VALIDATION_FAILED = "parameter validation failed:"
ALL_CHECKS_FAILED = "all checks failed:"


def indent_reasons(header: str, reasons: Sequence[str]) -> str:
    """Render *header* followed by one tab-indented line per reason."""

    return header + "".join(f"\n\t{reason}" for reason in reasons)


def format_validation_failure(reasons: Sequence[str]) -> str:
    """Produce the aggregated message for a session's failures.

    A single failure stays on one line; several are listed under the
    header in the order they were collected.
    """

    if len(reasons) == 1:
        return f"{VALIDATION_FAILED} {reasons[0]}"
    return indent_reasons(VALIDATION_FAILED, reasons)


def build_validation_error(reasons: Sequence[str]) -> ValidationError:
    return ValidationError(format_validation_failure(reasons), reasons)


__all__ = [
    "ALL_CHECKS_FAILED",
    "VALIDATION_FAILED",
    "build_validation_error",
    "format_validation_failure",
    "indent_reasons",
]
