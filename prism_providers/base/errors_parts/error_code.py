"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every ``ProviderError``. Values
are lowercase snake_case and are considered a stable public contract for
logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    PARSE = "parse"
    REFUSAL = "refusal"
    INCOMPLETE = "incomplete"
    CONTENT_FILTERED = "content_filtered"
    UNEXPECTED_STATE = "unexpected_state"
    UNSUPPORTED = "unsupported"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    TRANSIENT = "transient"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
