"""vala - fluent, composable argument validation.

Declare a batch of precondition checks, collect every failure, then
decide whether to return the aggregated error or to abort:

.. code-block:: python

    from vala import GreaterThan, IsNotNil, begin_validation

    error = begin_validation().validate(
        IsNotNil(user, "user"),
        GreaterThan(limit, 0, "limit"),
    ).check()
"""

from .boundary import ErrorSlot, recover, validation_boundary
from .checkers import (
    And,
    CheckResult,
    Checker,
    Equals,
    FunctionChecker,
    GreaterThan,
    HasLen,
    IsNotNil,
    Not,
    Or,
    StringNotEmpty,
    checker,
)
from .exceptions import (
    ConfigurationError,
    InvalidCheckResultError,
    UncheckableTypeError,
    ValaError,
    ValidationAbort,
    ValidationError,
)
from .validation import Validation, begin_validation

__version__ = "0.1.0"

__all__ = [
    "And",
    "CheckResult",
    "Checker",
    "ConfigurationError",
    "Equals",
    "ErrorSlot",
    "FunctionChecker",
    "GreaterThan",
    "HasLen",
    "InvalidCheckResultError",
    "IsNotNil",
    "Not",
    "Or",
    "StringNotEmpty",
    "UncheckableTypeError",
    "ValaError",
    "Validation",
    "ValidationAbort",
    "ValidationError",
    "begin_validation",
    "checker",
    "recover",
    "validation_boundary",
]
