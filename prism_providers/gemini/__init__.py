"""Gemini provider package (OpenAI-compatible endpoint)."""

from .client import GeminiProvider
from .completions import Completions
from .embeddings import Embeddings

__all__ = ["GeminiProvider", "Completions", "Embeddings"]
