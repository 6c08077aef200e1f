"""Gemini chat completions through Google's OpenAI-compatible endpoint.

``POST https://generativelanguage.googleapis.com/v1beta/openai/chat/completions``.
Body and normalization are the shared OpenAI-style ones. Gemini additionally
requires the conversation to end with a ``user`` turn; that is checked
before the request is sent.
"""

from __future__ import annotations

from ..base.errors import ValidationError
from ..base.models import CompletionRequest
from ..base.openai_style_parts import OpenAIStyleCompletions
from ..config.defaults import GEMINI_DEFAULT_MODEL


class Completions(OpenAIStyleCompletions):
    provider_name = "gemini"
    default_model = GEMINI_DEFAULT_MODEL

    def _validate_request(self, request: CompletionRequest) -> None:
        last_role = request.messages[-1].role
        if last_role != "user":
            raise ValidationError(
                f"Gemini: the last message must have role 'user'. Got '{last_role}'.",
                self.provider_name,
                model=request.model,
            )


__all__ = ["Completions"]
