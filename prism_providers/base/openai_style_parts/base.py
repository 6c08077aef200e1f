"""Adapter bases for providers exposing the OpenAI chat/embeddings wire format.

OpenAI, Gemini and OpenRouter subclass these and override only what differs:
default models, extra headers, extra request checks or extra finish reasons.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..adapter import BaseCompletions, BaseEmbeddings, Settings
from ..dto.call_options import CallOptions
from ..dto.responses import EmbeddingListPayload, parse_payload
from ..models import CompletionRequest, CompletionResponse
from .body import build_chat_body
from .normalize import normalize_chat_completion


def _endpoint(settings: Settings, suffix: str) -> str:
    return f"{settings.base_url.rstrip('/')}/{suffix}"


class OpenAIStyleCompletions(BaseCompletions):
    """``POST {base_url}/chat/completions`` with bearer authentication."""

    def _completions_url(self, settings: Settings, options: CallOptions) -> str:
        return _endpoint(settings, "chat/completions")

    def _build_body(self, request: CompletionRequest) -> Dict[str, Any]:
        return build_chat_body(request)

    def _normalize(self, payload: Any, request: CompletionRequest) -> CompletionResponse:
        return normalize_chat_completion(payload, provider=self.provider_name, model=request.model)


class OpenAIStyleEmbeddings(BaseEmbeddings):
    """``POST {base_url}/embeddings``; the vector is ``data[0].embedding``."""

    def _embeddings_url(self, settings: Settings, options: CallOptions) -> str:
        return _endpoint(settings, "embeddings")

    def _extract(self, payload: Any, model: str) -> List[float]:
        parsed = parse_payload(EmbeddingListPayload, payload, self.provider_name, model)
        return parsed.data[0].embedding


__all__ = ["OpenAIStyleCompletions", "OpenAIStyleEmbeddings"]
