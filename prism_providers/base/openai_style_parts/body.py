"""Request body construction for OpenAI-compatible chat endpoints."""

from __future__ import annotations

from typing import Any, Dict

from ..models import CompletionRequest
from ..structured import openai_response_format


def build_chat_body(request: CompletionRequest) -> Dict[str, Any]:
    """Return the ``chat/completions`` body for ``request``.

    Core keys (model, messages, stream, max_tokens, response_format, tools,
    tool_choice) are set first; pass-through parameters never replace them.
    """
    body: Dict[str, Any] = {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages],
        "stream": False,
    }
    if request.max_tokens is not None:
        body["max_tokens"] = request.max_tokens
    if request.json_schema is not None:
        body["response_format"] = openai_response_format(request.json_schema)
    if request.tools:
        body["tools"] = request.tools
    if request.tool_choice is not None:
        body["tool_choice"] = request.tool_choice
    for key, value in request.extra.items():
        body.setdefault(key, value)
    return body


__all__ = ["build_chat_body"]
