"""Ollama chat adapter.

Purpose:
    ``POST {host}/api/chat`` (path overridable per call with ``path=``),
    always non-streaming; a caller ``stream`` value never replaces it.

Request shape:
    - ``messages`` carry plain-text content; block lists are flattened with
      :meth:`Message.text_or_joined`.
    - ``format`` holds the raw JSON schema (``json_schema["schema"]`` or the
      object as-is).
    - Pass-through parameters (temperature, top_p, ...) go into ``options``;
      ``max_tokens`` becomes ``options.num_predict``.
    - Ollama has no ``tool_choice``; an explicit value is not sent.

Normalization:
    - non-empty ``message.tool_calls`` -> ``{tool_calls, content}``
    - ``done: true`` -> ``{content}``
    - anything else -> ``UnexpectedStateError`` naming ``done_reason``,
      ``done`` and the message.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.adapter import BaseCompletions, Settings
from ..base.dto.call_options import CallOptions
from ..base.dto.responses import OllamaChatPayload, OllamaMessagePayload, parse_payload
from ..base.errors import UnexpectedStateError
from ..base.models import CompletionRequest, CompletionResponse
from ..base.structured import ollama_format
from ..config.defaults import OLLAMA_CHAT_PATH, OLLAMA_DEFAULT_MODEL
from .helpers import build_options, ollama_headers, ollama_url, require_ollama_settings


class Completions(BaseCompletions):
    provider_name = "ollama"
    default_model = OLLAMA_DEFAULT_MODEL

    def _require_settings(self, settings: Settings, model: str) -> None:
        require_ollama_settings(settings, model)

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return ollama_headers(settings)

    def _completions_url(self, settings: Settings, options: CallOptions) -> str:
        return ollama_url(settings, options.path or OLLAMA_CHAT_PATH)

    def _build_body(self, request: CompletionRequest) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "model": request.model,
            "stream": False,
            "messages": [{"role": m.role, "content": m.text_or_joined()} for m in request.messages],
        }
        if request.json_schema is not None:
            body["format"] = ollama_format(request.json_schema)
        if request.tools:
            body["tools"] = request.tools
        options = build_options(request.extra, request.max_tokens)
        if options:
            body["options"] = options
        return body

    def _normalize(self, payload: Any, request: CompletionRequest) -> CompletionResponse:
        parsed = parse_payload(OllamaChatPayload, payload, self.provider_name, request.model)
        message = parsed.message or OllamaMessagePayload()
        if message.tool_calls:
            return CompletionResponse(content=message.content, tool_calls=message.tool_calls)
        if parsed.done is True:
            return CompletionResponse(content=message.content)
        raise UnexpectedStateError(
            f"Unexpected finish_reason: {parsed.done_reason}, done: {parsed.done}, "
            f"message: {message.model_dump(exclude_unset=True)}",
            self.provider_name,
            model=request.model,
            raw=payload,
        )


__all__ = ["Completions"]
