# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for vala."""

from __future__ import annotations

from typing import Mapping, Optional

from .runtime import meter, telemetry_enabled

check_total = meter.create_counter(
    name="vala.check.total",
    description="Counts checkers run by Validation.validate, tagged by outcome.",
    unit="1",
)

validation_abort_total = meter.create_counter(
    name="vala.validation.abort.total",
    description="Counts aborts raised because a validation session held failures.",
    unit="1",
)

boundary_recovered_total = meter.create_counter(
    name="vala.boundary.recovered.total",
    description="Counts validation aborts recovered at a validation boundary.",
    unit="1",
)


def record(counter, amount: int = 1, attributes: Optional[Mapping[str, str]] = None) -> None:
    """Add *amount* to *counter* unless telemetry is disabled."""

    if amount <= 0 or not telemetry_enabled():
        return
    counter.add(amount, dict(attributes or {}))


__all__ = [
    "boundary_recovered_total",
    "check_total",
    "record",
    "validation_abort_total",
]
