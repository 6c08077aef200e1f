"""Gemini embeddings through the OpenAI-compatible ``/embeddings`` endpoint."""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleEmbeddings
from ..config.defaults import GEMINI_DEFAULT_EMBEDDING_MODEL


class Embeddings(OpenAIStyleEmbeddings):
    provider_name = "gemini"
    default_model = GEMINI_DEFAULT_EMBEDDING_MODEL


__all__ = ["Embeddings"]
