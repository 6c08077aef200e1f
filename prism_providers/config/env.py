"""prism_providers.config.env
==========================

Environment variable names for provider credentials and endpoints.

Design Notes
------------
- ``ENV_MAP`` holds the canonical credential variable per provider. Providers
  that historically accepted more than one name list them in ``ENV_ALIASES``
  with the canonical name first to establish precedence.
- ``ENV_FIELD_MAP`` covers the non-credential settings (Ollama host,
  OpenRouter attribution headers, base URL overrides).

Failure Modes
-------------
Helpers never raise on unknown providers or unset variables; they return
``None`` and the adapters raise ``ConfigurationError`` when a required value
is still missing at call time.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "openai": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
    "ollama": "OLLAMA_API_KEY",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "claude": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

# provider -> {settings field: env var}
ENV_FIELD_MAP: Dict[str, Dict[str, str]] = {
    "openai": {"base_url": "OPENAI_BASE_URL"},
    "claude": {"base_url": "ANTHROPIC_BASE_URL"},
    "gemini": {"base_url": "GEMINI_BASE_URL"},
    "openrouter": {
        "base_url": "OPENROUTER_BASE_URL",
        "referer": "OPENROUTER_REFERER",
        "app_title": "OPENROUTER_APP_TITLE",
    },
    "ollama": {"host": "OLLAMA_HOST"},
}

DEFAULT_PROVIDER_ENV = "PRISM_DEFAULT_PROVIDER"
CONFIG_FILE_ENV = "PRISM_CONFIG_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder rather than a credential.

    Heuristics (case-insensitive): contains 'placeholder', 'changeme' or
    'example', or starts with 'your_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("your_")


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable credential variable names for a provider, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first non-empty, non-placeholder key.

    ``(None, None)`` when nothing usable is set.
    """
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        val = env.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def env_settings(provider: str, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect the settings fields for ``provider`` that are set in the environment."""
    env = os.environ if environ is None else environ
    out: Dict[str, str] = {}
    key, _ = resolve_provider_key(provider, env)
    if key:
        out["api_key"] = key
    for field, var in ENV_FIELD_MAP.get(provider, {}).items():
        val = env.get(var)
        if val:
            out[field] = val
    return out


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "ENV_FIELD_MAP",
    "DEFAULT_PROVIDER_ENV",
    "CONFIG_FILE_ENV",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
    "env_settings",
]
