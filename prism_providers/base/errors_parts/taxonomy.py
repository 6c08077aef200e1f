"""
Named failure conditions raised by provider adapters.

Each class fixes the :class:`ErrorCode` for one failure category so callers
can catch by type (``except IncompleteResponseError``) or by code. All of
them are :class:`ProviderError` instances and carry provider/model context.

Hierarchy::

    ProviderError
    ├── ConfigurationError
    │   ├── APIKeyNotConfiguredError
    │   ├── HostNotConfiguredError
    │   └── UnknownProviderError
    ├── ValidationError
    ├── TransportError
    ├── NetworkError
    ├── ParseError
    ├── RefusalError
    ├── IncompleteResponseError
    ├── ContentFilteredError
    ├── UnexpectedStateError
    └── UnsupportedOperationError
"""
from __future__ import annotations

from typing import Any, Optional

from .classification import classify_status, is_retryable_status
from .error_code import ErrorCode
from .provider_error import ProviderError


class ConfigurationError(ProviderError):
    """Required configuration is missing or invalid. Raised before any network call."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONFIGURATION,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class APIKeyNotConfiguredError(ConfigurationError):
    def __init__(self, provider: str, *, model: Optional[str] = None) -> None:
        super().__init__(f"API key is not configured for provider '{provider}'", provider, model=model)


class HostNotConfiguredError(ConfigurationError):
    def __init__(self, provider: str, *, model: Optional[str] = None) -> None:
        super().__init__(f"Host is not configured for provider '{provider}'", provider, model=model)


class UnknownProviderError(ConfigurationError):
    """The provider identifier is not a member of the closed registry."""

    def __init__(self, name: Any, supported: Optional[tuple] = None) -> None:
        self.name = name
        allowed = ", ".join(supported) if supported else ""
        message = f"Invalid default_llm_provider: {name}. Must be one of: {allowed}"
        super().__init__(message, str(name))


class ValidationError(ProviderError):
    """Caller input (messages, text) is malformed."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class TransportError(ProviderError):
    """The provider answered with a non-2xx HTTP status.

    ``code`` is refined from the status (auth, rate_limit, server_error, ...)
    and falls back to ``ErrorCode.TRANSPORT`` for unmapped statuses.
    """

    def __init__(
        self,
        status: int,
        body: str,
        provider: str,
        *,
        model: Optional[str] = None,
    ) -> None:
        self.status = status
        self.body = body
        super().__init__(
            code=classify_status(status) or ErrorCode.TRANSPORT,
            message=f"{provider} API error (HTTP {status}): {body}",
            provider=provider,
            model=model,
            retryable=is_retryable_status(status),
            raw=body,
        )


class NetworkError(ProviderError):
    """The request never produced a response (timeout, refused connection, DNS)."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        timed_out: bool = False,
        raw: Optional[Exception] = None,
    ) -> None:
        self.timed_out = timed_out
        super().__init__(
            code=ErrorCode.TIMEOUT if timed_out else ErrorCode.TRANSPORT,
            message=message,
            provider=provider,
            model=model,
            retryable=True,
            raw=raw,
        )


class ParseError(ProviderError):
    """The response body is not valid JSON."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PARSE,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class RefusalError(ProviderError):
    """The model explicitly declined to answer."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.REFUSAL,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class IncompleteResponseError(ProviderError):
    """Generation stopped at the token limit."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INCOMPLETE,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class ContentFilteredError(ProviderError):
    """Output was blocked by the provider's content policy."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONTENT_FILTERED,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class UnexpectedStateError(ProviderError):
    """The provider returned a status or shape the adapter does not recognize."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Any] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNEXPECTED_STATE,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class UnsupportedOperationError(ProviderError):
    def __init__(self, message: str, provider: str) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED, message=message, provider=provider)


__all__ = [
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
