# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the rest of the package.

vala only depends on the OpenTelemetry *API*. When the host application
has not installed an SDK, the API hands back no-op providers and every
instrument call below is free.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

from ..config import get_settings

METER_NAME = "vala"

meter = metrics.get_meter(METER_NAME)


def get_tracer(name: str = METER_NAME) -> trace.Tracer:
    """Return a tracer from the globally configured provider."""

    return trace.get_tracer(name)


def telemetry_enabled() -> bool:
    return get_settings().telemetry


__all__ = ["get_tracer", "meter", "telemetry_enabled"]
