"""Helpers shared by the Ollama completions and embeddings adapters."""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import urljoin

from ..base.adapter import Settings
from ..base.errors import APIKeyNotConfiguredError, HostNotConfiguredError


def require_ollama_settings(settings: Settings, model: str) -> None:
    """Host is always required; the API key unless ``api_key_required`` is off."""
    if not getattr(settings, "host", None):
        raise HostNotConfiguredError("ollama", model=model)
    if getattr(settings, "api_key_required", True) and not settings.api_key:
        raise APIKeyNotConfiguredError("ollama", model=model)


def ollama_headers(settings: Settings) -> Dict[str, str]:
    return {"Authorization": f"Bearer {settings.api_key}"} if settings.api_key else {}


def ollama_url(settings: Settings, path: str) -> str:
    """Resolve ``path`` against the configured host (``urljoin`` semantics).

    A relative path is appended to the host's directory, an absolute path
    (``/api/chat``) replaces the host's path.
    """
    return urljoin(getattr(settings, "host"), path)


def build_options(passthrough: Dict[str, Any], max_tokens: Optional[int] = None) -> Optional[Dict[str, Any]]:
    """Return the ``options`` object for the body, or ``None`` when empty.

    ``max_tokens`` maps onto Ollama's ``num_predict``.
    """
    options = dict(passthrough)
    if max_tokens is not None:
        options.setdefault("num_predict", max_tokens)
    return options or None


__all__ = ["require_ollama_settings", "ollama_headers", "ollama_url", "build_options"]
