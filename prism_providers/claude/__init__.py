"""
Claude provider package (Anthropic Messages API).

Exports:
- ClaudeProvider: facade with ``completions`` (``embeddings`` is unsupported)
- Completions: the adapter, including the schema-tool structured output shim
"""

from .client import ClaudeProvider
from .completions import Completions
from .embeddings import Embeddings

__all__ = ["ClaudeProvider", "Completions", "Embeddings"]
