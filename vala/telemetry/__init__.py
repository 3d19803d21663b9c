"""Telemetry package - OpenTelemetry meter, tracer and instruments."""

from .metrics import (
    boundary_recovered_total,
    check_total,
    record,
    validation_abort_total,
)
from .runtime import get_tracer, meter, telemetry_enabled

__all__ = [
    "boundary_recovered_total",
    "check_total",
    "get_tracer",
    "meter",
    "record",
    "telemetry_enabled",
    "validation_abort_total",
]
