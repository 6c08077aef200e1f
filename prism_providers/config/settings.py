"""
Typed, immutable provider configuration models.

Purpose
-------
Hold the credential and endpoint fields each adapter needs, validated once at
construction. Instances are frozen; reconfiguration means building a new
:class:`ProvidersConfig` and installing it with ``prism_providers.setup``.

External dependencies: Pydantic only. No I/O.

Failure modes
-------------
- An unknown ``default_provider`` raises :class:`UnknownProviderError`
  immediately (the registry is closed).
- Unknown fields raise ``pydantic.ValidationError``.
- Missing credentials are *not* a construction error: a deployment may
  configure only the providers it uses. Adapters raise
  ``APIKeyNotConfiguredError`` / ``HostNotConfiguredError`` at call time,
  before any network access.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..base.errors import UnknownProviderError
from .defaults import (
    CLAUDE_DEFAULT_BASE_URL,
    DEFAULT_PROVIDER,
    GEMINI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
)


class ProviderName(str, Enum):
    """Closed set of provider identifiers understood by the dispatcher."""

    OPENAI = "openai"
    OLLAMA = "ollama"
    CLAUDE = "claude"
    GEMINI = "gemini"
    OPENROUTER = "openrouter"

    @classmethod
    def parse(cls, value: Union[str, "ProviderName", None]) -> "ProviderName":
        """Return the member for ``value`` or raise :class:`UnknownProviderError`."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower() if value is not None else ""
        try:
            return cls(name)
        except ValueError:
            raise UnknownProviderError(value, tuple(m.value for m in cls)) from None


class ProviderSettings(BaseModel):
    """Settings shared by the key-authenticated HTTP providers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: Optional[str] = Field(default=None, repr=False)
    base_url: str = OPENAI_DEFAULT_BASE_URL


class OpenAISettings(ProviderSettings):
    base_url: str = OPENAI_DEFAULT_BASE_URL


class ClaudeSettings(ProviderSettings):
    base_url: str = CLAUDE_DEFAULT_BASE_URL


class GeminiSettings(ProviderSettings):
    base_url: str = GEMINI_DEFAULT_BASE_URL


class OpenRouterSettings(ProviderSettings):
    """OpenRouter also accepts attribution headers (``HTTP-Referer``, ``X-Title``)."""

    base_url: str = OPENROUTER_DEFAULT_BASE_URL
    referer: Optional[str] = None
    app_title: Optional[str] = None


class OllamaSettings(BaseModel):
    """Ollama is addressed by host; the API key guards proxied deployments.

    ``api_key_required`` defaults to True. Set it to False for a bare local
    daemon that accepts unauthenticated requests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: Optional[str] = None
    api_key: Optional[str] = Field(default=None, repr=False)
    api_key_required: bool = True


class ProvidersConfig(BaseModel):
    """Process-level configuration: default provider plus per-provider settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_provider: ProviderName = ProviderName(DEFAULT_PROVIDER)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    claude: ClaudeSettings = Field(default_factory=ClaudeSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    openrouter: OpenRouterSettings = Field(default_factory=OpenRouterSettings)
    ollama: OllamaSettings = Field(default_factory=OllamaSettings)

    @field_validator("default_provider", mode="before")
    @classmethod
    def _check_default_provider(cls, value: Any) -> ProviderName:
        # UnknownProviderError is not a ValueError, so it propagates unwrapped.
        return ProviderName.parse(value)

    def for_provider(self, name: Union[str, ProviderName]) -> Union[ProviderSettings, OllamaSettings]:
        """Return the settings block for ``name``."""
        return getattr(self, ProviderName.parse(name).value)


__all__ = [
    "ProviderName",
    "ProviderSettings",
    "OpenAISettings",
    "ClaudeSettings",
    "GeminiSettings",
    "OpenRouterSettings",
    "OllamaSettings",
    "ProvidersConfig",
]
