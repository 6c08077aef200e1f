"""
Error classification helpers mapping HTTP statuses to normalized
ErrorCode values.

``classify_status`` refines the code carried by a ``TransportError`` so a
401 surfaces as ``auth`` and a 429 as ``rate_limit``.
"""
from __future__ import annotations

from typing import Dict, Optional

from .error_code import ErrorCode


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_RETRYABLE_CODES = frozenset(
    {
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.TRANSIENT,
        ErrorCode.UNAVAILABLE,
        ErrorCode.SERVER_ERROR,
    }
)


def classify_status(status: Optional[int]) -> Optional[ErrorCode]:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unmapped 5xx statuses classify as ``SERVER_ERROR``; other unmapped
    statuses return ``None`` so callers can choose their own fallback.
    """
    if not isinstance(status, int):
        return None
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return None


def is_retryable_status(status: Optional[int]) -> bool:
    """Return True when a caller-side retry could plausibly succeed."""
    return classify_status(status) in _RETRYABLE_CODES


__all__ = [
    "classify_status",
    "is_retryable_status",
    "_HTTP_STATUS_MAP",
]
