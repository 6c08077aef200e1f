"""OpenRouter provider package."""

from .client import OpenRouterProvider
from .completions import Completions
from .embeddings import Embeddings

__all__ = ["OpenRouterProvider", "Completions", "Embeddings"]
