"""prism_providers: one request/response contract over several LLM HTTP APIs.

Typical use::

    import prism_providers

    prism_providers.setup(default_provider="openai", openai={"api_key": "sk-..."})
    provider = prism_providers.resolve()
    reply = provider.completions.create([{"role": "user", "content": "Hi"}])
    reply.content

    vector = prism_providers.create("ollama").embeddings.create("some text")

Supported providers: ``openai``, ``ollama``, ``claude``, ``gemini``,
``openrouter``.
"""

from __future__ import annotations

from typing import Optional, Union

from .base.errors import (
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
)
from .base.factory import ProviderFactory
from .base.models import CompletionResponse, Message
from .base.provider import BaseProvider
from .base.utils import EmbeddingBatchReport, embed_many
from .config import (
    ProviderName,
    ProvidersConfig,
    get_config,
    load_config,
    reset_config,
    setup,
)

__version__ = "0.4.0"


def resolve(config: Optional[ProvidersConfig] = None) -> BaseProvider:
    """Return the facade for the configured default provider."""
    return ProviderFactory.resolve(config)


def create(provider: Union[str, ProviderName]) -> BaseProvider:
    """Return the facade for ``provider`` reading the installed configuration."""
    return ProviderFactory.create(provider)


__all__ = [
    "__version__",
    "setup",
    "get_config",
    "load_config",
    "reset_config",
    "resolve",
    "create",
    "ProviderFactory",
    "ProviderName",
    "ProvidersConfig",
    "BaseProvider",
    "Message",
    "CompletionResponse",
    "embed_many",
    "EmbeddingBatchReport",
    "ErrorCode",
    "ProviderError",
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
