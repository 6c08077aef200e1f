"""OpenAI chat completions adapter.

``POST https://api.openai.com/v1/chat/completions`` with bearer auth.
Structured output uses native ``response_format: json_schema``; finish
reasons are normalized by the shared OpenAI-style table.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleCompletions
from ..config.defaults import OPENAI_DEFAULT_MODEL


class Completions(OpenAIStyleCompletions):
    provider_name = "openai"
    default_model = OPENAI_DEFAULT_MODEL


__all__ = ["Completions"]
