"""OpenRouter embeddings adapter (``/api/v1/embeddings``, OpenAI-compatible)."""

from __future__ import annotations

from typing import Dict

from ..base.adapter import Settings
from ..base.openai_style_parts import OpenAIStyleEmbeddings
from ..config.defaults import OPENROUTER_DEFAULT_EMBEDDING_MODEL
from .completions import attribution_headers


class Embeddings(OpenAIStyleEmbeddings):
    provider_name = "openrouter"
    default_model = OPENROUTER_DEFAULT_EMBEDDING_MODEL

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return {**super()._headers(settings), **attribution_headers(settings)}


__all__ = ["Embeddings"]
