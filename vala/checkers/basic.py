# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Basic checkers over a single captured argument.

Each checker captures its arguments at construction and does nothing
until a session (or a combinator) invokes it. Failure descriptions are
built only when somebody asks for them.
"""

from __future__ import annotations

import numbers
from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

from ..exceptions import UncheckableTypeError
from .base import Checker


@dataclass(frozen=True)
class Equals(Checker):
    """Passes when ``value`` and ``expected`` have the same type and compare equal.

    ``Equals(1, True, ...)`` and ``Equals(1, 1.0, ...)`` fail.
    """

    value: Any
    expected: Any
    name: str

    def evaluate(self) -> bool:
        return type(self.value) is type(self.expected) and self.value == self.expected

    def describe(self) -> str:
        return f"Parameters were not equal: {self.value}, {self.expected}"


@dataclass(frozen=True)
class IsNotNil(Checker):
    """Passes when ``value`` is present.

    ``None`` is absent, and so is the empty string. Numbers have no
    absence marker at all, so asking about one raises
    :class:`~vala.exceptions.UncheckableTypeError`. Every other object is a
    reference and is present.
    """

    value: Any
    name: str

    def evaluate(self) -> bool:
        obtained = self.value
        if obtained is None:
            return False
        if isinstance(obtained, str):
            return obtained != ""
        if isinstance(obtained, numbers.Number):
            raise UncheckableTypeError("IsNotNil", obtained, "nilability")
        return True

    def describe(self) -> str:
        return f"Parameter was nil: {self.name}"


@dataclass(frozen=True)
class HasLen(Checker):
    """Passes when ``len(value) == length``; ``value`` must be sized."""

    value: Any
    length: int
    name: str

    def evaluate(self) -> bool:
        if not isinstance(self.value, Sized):
            raise UncheckableTypeError("HasLen", self.value, "length")
        return len(self.value) == self.length

    def describe(self) -> str:
        return f"Parameter did not contain the correct number of elements: {self.name}"


@dataclass(frozen=True)
class GreaterThan(Checker):
    value: int
    threshold: int
    name: str

    def evaluate(self) -> bool:
        return self.value > self.threshold

    def describe(self) -> str:
        return (
            f"Parameter's length was not greater than:  "
            f"{self.name}({self.value}) < {self.threshold}"
        )


@dataclass(frozen=True)
class StringNotEmpty(Checker):
    value: str
    name: str

    def evaluate(self) -> bool:
        return self.value != ""

    def describe(self) -> str:
        return f"Parameter is an empty string: {self.name}"


__all__ = [
    "Equals",
    "GreaterThan",
    "HasLen",
    "IsNotNil",
    "StringNotEmpty",
]
