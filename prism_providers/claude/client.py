"""Claude provider facade (completions only)."""

from __future__ import annotations

from ..base.provider import BaseProvider
from .completions import Completions
from .embeddings import Embeddings


class ClaudeProvider(BaseProvider):
    name = "claude"
    completions_cls = Completions
    embeddings_cls = Embeddings
    supports_embeddings = False


__all__ = ["ClaudeProvider"]
