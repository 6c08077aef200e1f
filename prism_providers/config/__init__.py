"""Unified configuration layer for providers.

Goals
-----
* Build one immutable :class:`ProvidersConfig` per process.
* Merge sources in a predictable order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional external config file (JSON or YAML) named by PRISM_CONFIG_FILE
    3. Environment variables (``OPENAI_API_KEY``, ``OLLAMA_HOST`` ...)
    4. In-code overrides passed to :func:`load_config` / :func:`setup`
* Validate the default provider at construction so a bad identifier fails at
  setup rather than on the first call.

External Config File
--------------------
JSON is tried first, then YAML. Example::

    default_provider: ollama
    ollama:
      host: http://localhost:11434
      api_key_required: false
    openrouter:
      referer: https://example.org
      app_title: My App

Process registry
----------------
:func:`setup` installs a configuration under a lock; :func:`get_config`
returns it, lazily loading from the environment when nothing was installed.
Installation is meant to happen once at process start. Adapters only read.

Public API
----------
* load_config(overrides=None, environ=None) -> ProvidersConfig
* setup(config=None, **overrides) -> ProvidersConfig
* get_config() -> ProvidersConfig
* reset_config() -> None
"""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..base.errors import ConfigurationError
from .env import CONFIG_FILE_ENV, DEFAULT_PROVIDER_ENV, env_settings
from .settings import (
    ClaudeSettings,
    GeminiSettings,
    OllamaSettings,
    OpenAISettings,
    OpenRouterSettings,
    ProviderName,
    ProviderSettings,
    ProvidersConfig,
)

_CONFIG: Optional[ProvidersConfig] = None
_LOCK = threading.RLock()


def _load_external_config(path: Optional[str]) -> Dict[str, Any]:
    """Read the optional config file; a missing path yields an empty mapping.

    Raises
    ------
    ConfigurationError
        When the file exists but is neither valid JSON nor valid YAML, or
        does not contain a mapping at the top level.
    """
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file {p} is not valid JSON or YAML: {exc}", "config") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {p} must contain a mapping", "config")
    return data


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProvidersConfig:
    """Return a merged, validated :class:`ProvidersConfig`.

    ``overrides`` may hold ``default_provider`` and per-provider mappings
    (``{"ollama": {"host": ...}}``) or ready settings instances.

    Raises
    ------
    UnknownProviderError
        The resolved default provider is not a known identifier.
    ConfigurationError
        The config file is malformed or a settings block fails validation.
    """
    env = os.environ if environ is None else environ
    overrides = dict(overrides or {})
    file_cfg = _load_external_config(env.get(CONFIG_FILE_ENV))

    data: Dict[str, Any] = {}
    default_provider = overrides.pop("default_provider", None) or env.get(DEFAULT_PROVIDER_ENV) or file_cfg.get("default_provider")
    if default_provider is not None:
        data["default_provider"] = default_provider

    for name in ProviderName:
        key = name.value
        override = overrides.pop(key, None)
        if isinstance(override, (ProviderSettings, OllamaSettings)):
            data[key] = override
            continue
        section: Dict[str, Any] = {}
        file_section = file_cfg.get(key)
        if isinstance(file_section, dict):
            section |= file_section
        section |= env_settings(key, env)
        if override:
            section |= dict(override)
        data[key] = section

    if overrides:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(overrides))}", "config")
    try:
        return ProvidersConfig(**data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid provider configuration: {exc}", "config", raw=exc) from exc


def setup(config: Optional[ProvidersConfig] = None, **overrides: Any) -> ProvidersConfig:
    """Install the process-wide configuration and return it.

    Either pass a ready :class:`ProvidersConfig` or keyword overrides that are
    merged over the file/environment layers. Validation happens here, so an
    invalid default provider fails immediately.
    """
    global _CONFIG  # noqa: PLW0603 - documented process registry
    if config is not None and overrides:
        raise ConfigurationError("Pass either a ProvidersConfig or overrides, not both", "config")
    resolved = config if config is not None else load_config(overrides)
    with _LOCK:
        _CONFIG = resolved
    return resolved


def get_config() -> ProvidersConfig:
    """Return the installed configuration, loading it from the environment on first use."""
    global _CONFIG  # noqa: PLW0603 - documented process registry
    cfg = _CONFIG
    if cfg is not None:
        return cfg
    with _LOCK:
        if _CONFIG is None:
            _CONFIG = load_config()
        return _CONFIG


def reset_config() -> None:
    """Drop the installed configuration (tests and re-initialization)."""
    global _CONFIG  # noqa: PLW0603 - documented process registry
    with _LOCK:
        _CONFIG = None


__all__ = [
    "ProviderName",
    "ProviderSettings",
    "OpenAISettings",
    "ClaudeSettings",
    "GeminiSettings",
    "OpenRouterSettings",
    "OllamaSettings",
    "ProvidersConfig",
    "load_config",
    "setup",
    "get_config",
    "reset_config",
]
