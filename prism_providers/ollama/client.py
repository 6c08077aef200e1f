"""Ollama provider facade."""

from __future__ import annotations

from ..base.provider import BaseProvider
from .completions import Completions
from .embeddings import Embeddings


class OllamaProvider(BaseProvider):
    name = "ollama"
    completions_cls = Completions
    embeddings_cls = Embeddings


__all__ = ["OllamaProvider"]
