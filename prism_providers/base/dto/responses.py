"""
Provider response DTOs parsed once per call.

Each adapter decodes the JSON body and validates it into one of these models
via :func:`parse_payload`. Unknown keys are allowed (providers add fields
freely); a body that lacks the fields normalization depends on is rejected
as :class:`UnexpectedStateError` instead of propagating ``None`` downstream.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import UnexpectedStateError

T = TypeVar("T", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow")


# ---- OpenAI-compatible chat (OpenAI, Gemini, OpenRouter) ----


class ChatMessagePayload(_Payload):
    role: Optional[str] = None
    content: Any = None
    refusal: Optional[Any] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None
    function_call: Optional[Dict[str, Any]] = None


class ChatChoicePayload(_Payload):
    message: ChatMessagePayload = Field(default_factory=ChatMessagePayload)
    finish_reason: Optional[str] = None


class ChatCompletionPayload(_Payload):
    choices: List[ChatChoicePayload] = Field(min_length=1)

    @property
    def first(self) -> ChatChoicePayload:
        return self.choices[0]


# ---- Ollama chat ----


class OllamaMessagePayload(_Payload):
    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None


class OllamaChatPayload(_Payload):
    message: Optional[OllamaMessagePayload] = None
    done: Optional[bool] = None
    done_reason: Optional[str] = None


# ---- Claude messages ----


class ClaudeBlockPayload(_Payload):
    type: str
    text: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    input: Any = None

    def to_native(self) -> Dict[str, Any]:
        """Return the block as the provider sent it."""
        return self.model_dump(exclude_unset=True)


class ClaudeMessagePayload(_Payload):
    content: List[ClaudeBlockPayload] = Field(default_factory=list)
    stop_reason: Optional[str] = None


# ---- Embeddings ----


class EmbeddingItemPayload(_Payload):
    embedding: List[float] = Field(min_length=1)


class EmbeddingListPayload(_Payload):
    """OpenAI-compatible ``{"data": [{"embedding": [...]}]}`` shape."""

    data: List[EmbeddingItemPayload] = Field(min_length=1)


class OllamaEmbeddingPayload(_Payload):
    embedding: List[float] = Field(min_length=1)


def parse_payload(model_cls: Type[T], data: Any, provider: str, model: Optional[str] = None) -> T:
    """Validate decoded JSON into ``model_cls``.

    Raises
    ------
    UnexpectedStateError
        The body does not have the expected shape.
    """
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise UnexpectedStateError(
            f"Unexpected {provider} response shape ({model_cls.__name__}): {exc.errors(include_url=False)}",
            provider,
            model=model,
            raw=data,
        ) from exc


__all__ = [
    "ChatMessagePayload",
    "ChatChoicePayload",
    "ChatCompletionPayload",
    "OllamaMessagePayload",
    "OllamaChatPayload",
    "ClaudeBlockPayload",
    "ClaudeMessagePayload",
    "EmbeddingItemPayload",
    "EmbeddingListPayload",
    "OllamaEmbeddingPayload",
    "parse_payload",
]
