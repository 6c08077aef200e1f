"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `prism_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_status, is_retryable_status
from .taxonomy import (
    APIKeyNotConfiguredError,
    ConfigurationError,
    ContentFilteredError,
    HostNotConfiguredError,
    IncompleteResponseError,
    NetworkError,
    ParseError,
    RefusalError,
    TransportError,
    UnexpectedStateError,
    UnknownProviderError,
    UnsupportedOperationError,
    ValidationError,
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
