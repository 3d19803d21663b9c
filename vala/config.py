"""Environment-driven settings.

Read on every call so tests (and long-lived processes) can flip
``VALA_*`` variables without reloading modules.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Snapshot of the ``VALA_*`` environment."""

    telemetry: bool = True
    log_failures: bool = False


def _env_flag(name: str, default: bool, strict: bool) -> bool:
    raw: Optional[str] = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False

    message = (
        f"Environment variable {name} must be one of "
        f"{sorted(_TRUTHY | (_FALSY - {''}))}, got {raw!r}"
    )
    if strict:
        raise ConfigurationError(message)
    logger.error("%s; using default %s", message, default)
    return default


def get_settings(*, strict: bool = False) -> Settings:
    """Return the current settings, parsed from the environment.

    Unrecognised values are logged and replaced by their default, so a
    typo in the environment never changes the outcome of a validation.
    Pass ``strict=True`` (e.g. from an application's startup checks) to
    get a :class:`~vala.exceptions.ConfigurationError` instead.
    """

    return Settings(
        telemetry=_env_flag("VALA_TELEMETRY", True, strict),
        log_failures=_env_flag("VALA_LOG_FAILURES", False, strict),
    )


__all__ = ["Settings", "get_settings"]
