"""Timeout configuration for provider HTTP calls.

Every adapter call performs exactly one blocking POST bounded by a
connect ("open") timeout and a read timeout. This module is the single source
of the default values and of the per-call resolution rule.

TimeoutConfig
    Frozen dataclass holding the process defaults (60s / 60s).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again whenever they change. Supported variables (optional,
    positive floats):
        PRISM_READ_TIMEOUT_SECONDS
        PRISM_OPEN_TIMEOUT_SECONDS

resolve_timeouts(read_timeout, open_timeout)
    Per-call overrides win over the process defaults.

Failure Modes
-------------
Invalid or non-positive environment values are ignored and the default is
kept. Expiry itself surfaces from the transport as ``NetworkError``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.defaults import DEFAULT_OPEN_TIMEOUT_SECONDS, DEFAULT_READ_TIMEOUT_SECONDS

READ_TIMEOUT_ENV = "PRISM_READ_TIMEOUT_SECONDS"
OPEN_TIMEOUT_ENV = "PRISM_OPEN_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        read_timeout_seconds: Maximum wait for response bytes once connected.
        open_timeout_seconds: Maximum wait to establish the connection.
    """

    read_timeout_seconds: float = DEFAULT_READ_TIMEOUT_SECONDS
    open_timeout_seconds: float = DEFAULT_OPEN_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, returning ``default`` when unset or invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`, refreshed when env overrides change."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = "/".join([os.getenv(READ_TIMEOUT_ENV, ""), os.getenv(OPEN_TIMEOUT_ENV, "")])
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        read_timeout_seconds=_parse_env_float(READ_TIMEOUT_ENV, DEFAULT_READ_TIMEOUT_SECONDS),
        open_timeout_seconds=_parse_env_float(OPEN_TIMEOUT_ENV, DEFAULT_OPEN_TIMEOUT_SECONDS),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def resolve_timeouts(
    read_timeout: Optional[float] = None,
    open_timeout: Optional[float] = None,
) -> Tuple[float, float]:
    """Return ``(read, open)`` seconds, preferring per-call values over defaults."""
    cfg = get_timeout_config()
    read = float(read_timeout) if read_timeout is not None else cfg.read_timeout_seconds
    opened = float(open_timeout) if open_timeout is not None else cfg.open_timeout_seconds
    return read, opened


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "resolve_timeouts",
]
