"""Ollama embeddings adapter.

``POST {host}/api/embeddings`` with ``{"model": ..., "prompt": text}``. Both
the path (``path=``) and the body key carrying the text (``param_name=``)
can be overridden per call for deployments that proxy Ollama behind a
different route. Pass-through parameters go into ``options``.
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..base.adapter import BaseEmbeddings, Settings
from ..base.dto.call_options import CallOptions
from ..base.dto.responses import OllamaEmbeddingPayload, parse_payload
from ..config.defaults import OLLAMA_DEFAULT_EMBEDDING_MODEL, OLLAMA_EMBEDDINGS_PARAM, OLLAMA_EMBEDDINGS_PATH
from .helpers import build_options, ollama_headers, ollama_url, require_ollama_settings


class Embeddings(BaseEmbeddings):
    provider_name = "ollama"
    default_model = OLLAMA_DEFAULT_EMBEDDING_MODEL

    def _require_settings(self, settings: Settings, model: str) -> None:
        require_ollama_settings(settings, model)

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return ollama_headers(settings)

    def _embeddings_url(self, settings: Settings, options: CallOptions) -> str:
        return ollama_url(settings, options.path or OLLAMA_EMBEDDINGS_PATH)

    def _build_body(self, text: str, model: str, passthrough: Dict[str, Any], options: CallOptions) -> Dict[str, Any]:
        body: Dict[str, Any] = {"model": model, options.param_name or OLLAMA_EMBEDDINGS_PARAM: text}
        extra = build_options(passthrough)
        if extra:
            body["options"] = extra
        return body

    def _extract(self, payload: Any, model: str) -> List[float]:
        return parse_payload(OllamaEmbeddingPayload, payload, self.provider_name, model).embedding


__all__ = ["Embeddings"]
