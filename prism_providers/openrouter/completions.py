"""OpenRouter chat completions adapter.

``POST https://openrouter.ai/api/v1/chat/completions``. Shares the
OpenAI-style body and finish-reason table and adds:

- optional attribution headers ``HTTP-Referer`` (settings ``referer``) and
  ``X-Title`` (settings ``app_title``);
- ``finish_reason == "error"``, which OpenRouter uses when the upstream
  model failed mid-generation, raised as ``UnexpectedStateError`` carrying
  the full response payload.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.adapter import Settings
from ..base.dto.responses import ChatCompletionPayload, parse_payload
from ..base.errors import UnexpectedStateError
from ..base.models import CompletionRequest, CompletionResponse
from ..base.openai_style_parts import OpenAIStyleCompletions
from ..config.defaults import OPENROUTER_DEFAULT_MODEL


def attribution_headers(settings: Settings) -> Dict[str, str]:
    """Return the optional OpenRouter attribution headers set in ``settings``."""
    headers: Dict[str, str] = {}
    referer = getattr(settings, "referer", None)
    app_title = getattr(settings, "app_title", None)
    if referer:
        headers["HTTP-Referer"] = referer
    if app_title:
        headers["X-Title"] = app_title
    return headers


class Completions(OpenAIStyleCompletions):
    provider_name = "openrouter"
    default_model = OPENROUTER_DEFAULT_MODEL

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return {**super()._headers(settings), **attribution_headers(settings)}

    def _normalize(self, payload: Any, request: CompletionRequest) -> CompletionResponse:
        choice = parse_payload(ChatCompletionPayload, payload, self.provider_name, request.model).first
        if not choice.message.refusal and choice.finish_reason == "error":
            raise UnexpectedStateError(
                f"Model returned finish_reason=error: {payload}",
                self.provider_name,
                model=request.model,
                raw=payload,
            )
        return super()._normalize(payload, request)


__all__ = ["Completions", "attribution_headers"]
