"""Shared pieces for OpenAI-compatible providers (OpenAI, Gemini, OpenRouter)."""

from .base import OpenAIStyleCompletions, OpenAIStyleEmbeddings
from .body import build_chat_body
from .normalize import (
    CONTENT_FILTERED_MESSAGE,
    INCOMPLETE_MESSAGE,
    classify_choice,
    normalize_chat_completion,
)

__all__ = [
    "OpenAIStyleCompletions",
    "OpenAIStyleEmbeddings",
    "build_chat_body",
    "CONTENT_FILTERED_MESSAGE",
    "INCOMPLETE_MESSAGE",
    "classify_choice",
    "normalize_chat_completion",
]
