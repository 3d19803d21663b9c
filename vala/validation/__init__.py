"""Validation package - the fluent session that runs and collects checks."""

from .session import Validation, begin_validation

__all__ = [
    "Validation",
    "begin_validation",
]
