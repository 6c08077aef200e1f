"""Ollama provider package (HTTP API of a local or proxied Ollama daemon)."""

from .client import OllamaProvider
from .completions import Completions
from .embeddings import Embeddings

__all__ = ["OllamaProvider", "Completions", "Embeddings"]
