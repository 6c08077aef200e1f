"""Pydantic DTOs used at the adapter boundaries (input validation, call options, response shapes)."""

from .call_options import CONTROL_KEYS, CallOptions, split_call_options
from .chat import MessageDTO, validate_messages, validate_text
from .responses import (
    ChatCompletionPayload,
    ClaudeMessagePayload,
    EmbeddingListPayload,
    OllamaChatPayload,
    OllamaEmbeddingPayload,
    parse_payload,
)

__all__ = [
    "CallOptions",
    "CONTROL_KEYS",
    "split_call_options",
    "MessageDTO",
    "validate_messages",
    "validate_text",
    "ChatCompletionPayload",
    "ClaudeMessagePayload",
    "EmbeddingListPayload",
    "OllamaChatPayload",
    "OllamaEmbeddingPayload",
    "parse_payload",
]
