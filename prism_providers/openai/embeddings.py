"""OpenAI embeddings adapter (``/v1/embeddings``, vector at ``data[0].embedding``)."""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleEmbeddings
from ..config.defaults import OPENAI_DEFAULT_EMBEDDING_MODEL


class Embeddings(OpenAIStyleEmbeddings):
    provider_name = "openai"
    default_model = OPENAI_DEFAULT_EMBEDDING_MODEL


__all__ = ["Embeddings"]
