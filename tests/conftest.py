"""Pytest fixtures shared by the vala test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest


class RecordingCounter:  # pylint: disable=too-few-public-methods
    """Stand-in for an OpenTelemetry counter that remembers every add()."""

    def __init__(self):
        self.calls: List[Tuple[int, Dict[str, Any]]] = []

    def add(self, amount, attributes=None):  # noqa: D401
        self.calls.append((amount, dict(attributes or {})))

    def total(self, **attributes) -> int:
        return sum(
            amount
            for amount, attrs in self.calls
            if all(attrs.get(k) == v for k, v in attributes.items())
        )


@pytest.fixture(autouse=True)
def _clean_vala_env(monkeypatch):  # noqa: D401
    """Every test starts from the default VALA_* configuration."""
    for name in ("VALA_TELEMETRY", "VALA_LOG_FAILURES"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def check_counter(monkeypatch) -> RecordingCounter:
    counter = RecordingCounter()
    monkeypatch.setattr("vala.validation.session.check_total", counter)
    return counter


@pytest.fixture()
def abort_counter(monkeypatch) -> RecordingCounter:
    counter = RecordingCounter()
    monkeypatch.setattr("vala.validation.session.validation_abort_total", counter)
    return counter


@pytest.fixture()
def recovered_counter(monkeypatch) -> RecordingCounter:
    counter = RecordingCounter()
    monkeypatch.setattr("vala.boundary.boundary_recovered_total", counter)
    return counter


# ---------------------------------------------------------------------------
# anyio backend selection – ensure tests run only with asyncio backend
# ---------------------------------------------------------------------------

@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
