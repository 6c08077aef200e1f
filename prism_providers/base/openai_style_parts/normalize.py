"""Finish-reason normalization for OpenAI-compatible chat responses.

Shared by OpenAI, Gemini (OpenAI-compatible endpoint) and OpenRouter. The
first choice's ``finish_reason`` is mapped onto :class:`FinishState`; a
message-level ``refusal`` is checked before the finish reason.

==================  ================  =========================
finish_reason       state             outcome
==================  ================  =========================
(refusal present)   REFUSAL           ``RefusalError``
stop                STOP              ``{content}``
length              LENGTH_LIMIT      ``IncompleteResponseError``
model_length        LENGTH_LIMIT      ``IncompleteResponseError``
content_filter      CONTENT_FILTERED  ``ContentFilteredError``
tool_calls          TOOL_USE          ``{tool_calls, content}``
function_call       TOOL_USE          ``{tool_calls, content}``
anything else       UNEXPECTED        ``UnexpectedStateError``
==================  ================  =========================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..dto.responses import ChatChoicePayload, ChatCompletionPayload, parse_payload
from ..errors import (
    ContentFilteredError,
    IncompleteResponseError,
    RefusalError,
    UnexpectedStateError,
)
from ..models import CompletionResponse, FinishState

INCOMPLETE_MESSAGE = "Incomplete response: The completion was cut off due to token limit."
CONTENT_FILTERED_MESSAGE = "Content filtered: The model's output was blocked due to policy violations."

_FINISH_REASONS: Dict[str, FinishState] = {
    "stop": FinishState.STOP,
    "length": FinishState.LENGTH_LIMIT,
    "model_length": FinishState.LENGTH_LIMIT,
    "content_filter": FinishState.CONTENT_FILTERED,
    "tool_calls": FinishState.TOOL_USE,
    "function_call": FinishState.TOOL_USE,
}


def classify_choice(choice: ChatChoicePayload) -> FinishState:
    """Map one choice onto a :class:`FinishState`."""
    if choice.message.refusal:
        return FinishState.REFUSAL
    return _FINISH_REASONS.get(choice.finish_reason or "", FinishState.UNEXPECTED)


def _tool_calls(choice: ChatChoicePayload) -> Optional[List[Dict[str, Any]]]:
    message = choice.message
    if message.tool_calls:
        return message.tool_calls
    if message.function_call:
        # legacy single function call
        return [message.function_call]
    return None


def normalize_chat_completion(payload: Any, *, provider: str, model: Optional[str] = None) -> CompletionResponse:
    """Normalize a decoded OpenAI-style chat completion body.

    Raises
    ------
    RefusalError, IncompleteResponseError, ContentFilteredError
        The matching terminal state.
    UnexpectedStateError
        Unknown finish reason or a body without ``choices``.
    """
    parsed = parse_payload(ChatCompletionPayload, payload, provider, model)
    choice = parsed.first
    state = classify_choice(choice)
    if state is FinishState.STOP:
        return CompletionResponse(content=choice.message.content)
    if state is FinishState.TOOL_USE:
        return CompletionResponse(content=choice.message.content, tool_calls=_tool_calls(choice))
    if state is FinishState.REFUSAL:
        raise RefusalError(f"Refusal: {choice.message.refusal}", provider, model=model, raw=payload)
    if state is FinishState.LENGTH_LIMIT:
        raise IncompleteResponseError(INCOMPLETE_MESSAGE, provider, model=model, raw=payload)
    if state is FinishState.CONTENT_FILTERED:
        raise ContentFilteredError(CONTENT_FILTERED_MESSAGE, provider, model=model, raw=payload)
    raise UnexpectedStateError(f"Unexpected finish_reason: {choice.finish_reason}", provider, model=model, raw=payload)


__all__ = [
    "INCOMPLETE_MESSAGE",
    "CONTENT_FILTERED_MESSAGE",
    "classify_choice",
    "normalize_chat_completion",
]
