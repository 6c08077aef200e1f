"""
OpenAI provider package.

Exports:
- OpenAIProvider: facade with ``completions`` and ``embeddings``
- Completions, Embeddings: the adapters themselves
"""

from .client import OpenAIProvider
from .completions import Completions
from .embeddings import Embeddings

__all__ = ["OpenAIProvider", "Completions", "Embeddings"]
