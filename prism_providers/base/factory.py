"""Provider Factory (dispatcher).

Purpose
-------
Map the closed set of provider identifiers (:class:`ProviderName`) to their
facade classes. Provider packages are imported lazily with ``importlib`` so
importing the factory stays cheap.

External dependencies
---------------------
Standard library only (``importlib``).

Failure modes
-------------
- Unknown identifier -> :class:`UnknownProviderError` naming it. The same
  check runs when a :class:`ProvidersConfig` is built, so a bad default
  provider fails at setup, not at first use.
- A registered module that cannot be imported, or lacks its class, is a
  packaging defect and surfaces as :class:`ConfigurationError`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Optional, Tuple, Type, Union

from ..config import get_config
from ..config.settings import ProviderName, ProvidersConfig
from .adapter import Settings
from .errors import ConfigurationError
from .provider import BaseProvider


class ProviderFactory:
    """Create provider facades from a canonical identifier (e.g. ``"openai"``)."""

    _PROVIDERS: Dict[ProviderName, Dict[str, str]] = {
        ProviderName.OPENAI: {"module": "prism_providers.openai.client", "class": "OpenAIProvider"},
        ProviderName.OLLAMA: {"module": "prism_providers.ollama.client", "class": "OllamaProvider"},
        ProviderName.CLAUDE: {"module": "prism_providers.claude.client", "class": "ClaudeProvider"},
        ProviderName.GEMINI: {"module": "prism_providers.gemini.client", "class": "GeminiProvider"},
        ProviderName.OPENROUTER: {"module": "prism_providers.openrouter.client", "class": "OpenRouterProvider"},
    }

    @classmethod
    def provider_class(cls, provider: Union[str, ProviderName]) -> Type[BaseProvider]:
        """Return the facade class registered for ``provider``.

        Raises
        ------
        UnknownProviderError
            ``provider`` is not a registered identifier.
        ConfigurationError
            The registered module or class cannot be loaded.
        """
        name = ProviderName.parse(provider)
        entry = cls._PROVIDERS.get(name)
        if entry is None:
            raise ConfigurationError(f"No adapter registered for provider '{name.value}'", name.value)
        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise ConfigurationError(
                f"Failed to import module '{module_path}' for provider '{name.value}': {exc}", name.value
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{name.value}'", name.value
            ) from exc

    @classmethod
    def create(cls, provider: Union[str, ProviderName], settings: Optional[Settings] = None) -> BaseProvider:
        """Instantiate the facade for ``provider``.

        ``settings`` pins the adapters to an explicit settings block; without
        it they read the installed process configuration per call.
        """
        return cls.provider_class(provider)(settings)

    @classmethod
    def resolve(cls, config: Optional[ProvidersConfig] = None) -> BaseProvider:
        """Return the facade for the configured default provider."""
        cfg = config if config is not None else get_config()
        if config is None:
            return cls.create(cfg.default_provider)
        return cls.create(cfg.default_provider, cfg.for_provider(cfg.default_provider))

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in registry order."""
        return tuple(name.value for name in cls._PROVIDERS)


def create_provider(provider: Union[str, ProviderName], settings: Optional[Settings] = None) -> BaseProvider:
    """Module-level shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, settings)


__all__ = ["ProviderFactory", "create_provider"]
