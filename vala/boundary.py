# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# vala/boundary.py

"""Recovery side of the abort path.

``check_and_abort`` and ``check_set_error_and_abort`` unwind with a
:class:`~vala.exceptions.ValidationAbort`. A boundary is the place where a
caller turns that abort back into an ordinary error: either a ``with
recover() as slot:`` block, or a function decorated with
:func:`validation_boundary`.
"""

import functools
import inspect
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .config import get_settings
from .exceptions import ValidationAbort, ValidationError
from .telemetry import boundary_recovered_total, get_tracer, record

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()


class ErrorSlot:
    """Mutable holder for the error produced by an aborted validation.

    Owned by the boundary; filled in by
    :meth:`Validation.check_set_error_and_abort` right before it aborts.
    Stays empty when validation succeeds.
    """

    __slots__ = ("error",)

    def __init__(self) -> None:
        self.error: Optional[ValidationError] = None

    def __bool__(self) -> bool:
        return self.error is not None

    def __repr__(self) -> str:
        return f"ErrorSlot(error={self.error!r})"


def _note_recovered(where: str, error: ValidationError) -> None:
    record(boundary_recovered_total, 1, {"function": where})
    if get_settings().log_failures:
        logger.warning("Validation failed in %s: %s", where, error)
    else:
        logger.debug("Recovered validation abort in %s", where)


@contextmanager
def recover(slot: Optional[ErrorSlot] = None) -> Iterator[ErrorSlot]:
    """Catch a validation abort raised inside the block.

    The slot is emptied on entry, so a reused slot never carries an
    earlier block's error. On abort it holds the abort's payload, which is
    the same object ``check_set_error_and_abort`` already wrote into it.
    Anything other than a :class:`ValidationAbort` propagates.

    .. code-block:: python

        def handle_report(author, report):
            with recover() as slot:
                begin_validation().validate(
                    StringNotEmpty(author, "author"),
                    IsNotNil(report, "report"),
                ).check_set_error_and_abort(slot)
                publish(report)
            return slot.error
    """

    if slot is None:
        slot = ErrorSlot()
    slot.error = None
    try:
        yield slot
    except ValidationAbort as abort:
        slot.error = abort.error
        _note_recovered("recover()", slot.error)


def validation_boundary(
    func: Optional[Callable] = None,
    *,
    on_failure: Any = _sentinel,
):
    """Decorator that stops validation aborts at the function edge.

    :param on_failure: Optional. Decides what happens when the wrapped
                       function aborts. If it is a callable, it is invoked
                       and its result returned; the
                       :class:`~vala.exceptions.ValidationError` is passed
                       as an argument if the callable accepts it. If it is
                       any other value, that value is returned directly.
                       If not provided, the ``ValidationError`` is raised
                       as an ordinary exception.

    Works on both plain and ``async`` functions, with or without
    arguments:

    .. code-block:: python

        @validation_boundary
        def create_user(name, age):
            begin_validation().validate(
                StringNotEmpty(name, "name"),
                GreaterThan(age, 17, "age"),
            ).check_and_abort()
            ...

        @validation_boundary(on_failure=lambda error: {"error": str(error)})
        async def create_user_view(request): ...
    """

    def decorator(fn: Callable):
        where = fn.__qualname__
        tracer = get_tracer("vala.boundary")

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            """Wrapper for synchronous functions."""
            with tracer.start_as_current_span(
                f"vala.boundary:{where}", attributes={"vala.function": where}
            ) as span:
                try:
                    return fn(*args, **kwargs)
                except ValidationAbort as abort:
                    span.set_attribute("vala.validation_failed", True)
                    _note_recovered(where, abort.error)
                    error = abort.error

            return _handle_failure(error)

        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            """Wrapper for asynchronous functions."""
            with tracer.start_as_current_span(
                f"vala.boundary:{where}", attributes={"vala.function": where}
            ) as span:
                try:
                    return await fn(*args, **kwargs)
                except ValidationAbort as abort:
                    span.set_attribute("vala.validation_failed", True)
                    _note_recovered(where, abort.error)
                    error = abort.error

            result = _handle_failure(error)
            if inspect.isawaitable(result):
                return await result
            return result

        def _handle_failure(error: ValidationError):
            """Executes the user-supplied `on_failure` handler or raises by default."""

            if on_failure is _sentinel:
                raise error

            # Static value supplied (e.g. None/False)
            if not callable(on_failure):
                return on_failure

            # Handler with or without the error argument.
            try:
                inspect.signature(on_failure).bind(error)
            except (TypeError, ValueError):
                return on_failure()
            return on_failure(error)

        if inspect.iscoroutinefunction(fn):
            wrapper = async_wrapper
        else:
            wrapper = sync_wrapper

        wrapper.__vala_boundary__ = True
        return wrapper

    # Dual syntax: @validation_boundary vs @validation_boundary(...)
    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["ErrorSlot", "recover", "validation_boundary"]
