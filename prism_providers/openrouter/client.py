"""OpenRouter provider facade."""

from __future__ import annotations

from ..base.provider import BaseProvider
from .completions import Completions
from .embeddings import Embeddings


class OpenRouterProvider(BaseProvider):
    name = "openrouter"
    completions_cls = Completions
    embeddings_cls = Embeddings


__all__ = ["OpenRouterProvider"]
