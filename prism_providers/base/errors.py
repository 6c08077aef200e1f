"""Unified provider error taxonomy public surface.

This module re-exports the implementations under
``prism_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts import (
    APIKeyNotConfiguredError,
    ConfigurationError,
    ContentFilteredError,
    ErrorCode,
    HostNotConfiguredError,
    IncompleteResponseError,
    NetworkError,
    ParseError,
    ProviderError,
    RefusalError,
    TransportError,
    UnexpectedStateError,
    UnknownProviderError,
    UnsupportedOperationError,
    ValidationError,
    classify_status,
    is_retryable_status,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_status",
    "is_retryable_status",
    "ConfigurationError",
    "APIKeyNotConfiguredError",
    "HostNotConfiguredError",
    "UnknownProviderError",
    "ValidationError",
    "TransportError",
    "NetworkError",
    "ParseError",
    "RefusalError",
    "IncompleteResponseError",
    "ContentFilteredError",
    "UnexpectedStateError",
    "UnsupportedOperationError",
]
