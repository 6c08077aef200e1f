"""Claude (Anthropic Messages API) completions adapter.

Request
-------
``POST https://api.anthropic.com/v1/messages`` with ``x-api-key`` and
``anthropic-version: 2023-06-01``.

- System messages are lifted out of ``messages`` and joined with a blank
  line into the top-level ``system`` field.
- ``max_tokens`` is mandatory for this API and defaults to 1024.
- ``stream`` is always false.
- Content blocks (images, documents) pass through unmodified.
- A ``json_schema`` becomes a synthesized tool that ``tool_choice`` forces,
  unless the caller supplied an explicit ``tool_choice``.

Response
--------
Text blocks are concatenated; ``tool_use`` blocks are collected.

==================================  ==================================
condition                           outcome
==================================  ==================================
stop_reason ``max_tokens``          ``IncompleteResponseError``
stop_reason ``refusal``             ``RefusalError``
schema + one tool_use + no text     ``{content: <tool input>}``
any tool_use                        ``{tool_calls, content}``
``end_turn`` or no stop_reason      ``{content}``
anything else                       ``UnexpectedStateError``
==================================  ==================================

The schema row makes tool-forced structured output look exactly like native
structured output from the other providers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..base.adapter import BaseCompletions, Settings
from ..base.dto.call_options import CallOptions
from ..base.dto.responses import ClaudeBlockPayload, ClaudeMessagePayload, parse_payload
from ..base.errors import IncompleteResponseError, RefusalError, UnexpectedStateError
from ..base.models import CompletionRequest, CompletionResponse, FinishState, Message
from ..base.openai_style_parts import INCOMPLETE_MESSAGE
from ..base.structured import claude_structured_tools
from ..config.defaults import CLAUDE_API_VERSION, CLAUDE_DEFAULT_MAX_TOKENS, CLAUDE_DEFAULT_MODEL

REFUSAL_MESSAGE = "Refusal: The model declined to respond to this request."


def partition_messages(messages: List[Message]) -> Tuple[List[str], List[Dict[str, Any]]]:
    """Split messages into system prompt texts and Anthropic chat messages."""
    system_prompts: List[str] = []
    chat: List[Dict[str, Any]] = []
    for message in messages:
        if message.role == "system":
            system_prompts.append(message.text_or_joined())
        else:
            chat.append(message.to_dict())
    return system_prompts, chat


def _classify(stop_reason: Optional[str], has_tool_use: bool) -> FinishState:
    if stop_reason == "max_tokens":
        return FinishState.LENGTH_LIMIT
    if stop_reason == "refusal":
        return FinishState.REFUSAL
    if has_tool_use:
        return FinishState.TOOL_USE
    if stop_reason in (None, "end_turn"):
        return FinishState.STOP
    return FinishState.UNEXPECTED


def _schema_answer(tool_uses: List[ClaudeBlockPayload], text: str) -> Optional[Any]:
    """Return the tool input when it is the structured answer, else ``None``."""
    if len(tool_uses) != 1 or text.strip():
        return None
    value = tool_uses[0].input
    return value if isinstance(value, (dict, list)) else None


class Completions(BaseCompletions):
    provider_name = "claude"
    default_model = CLAUDE_DEFAULT_MODEL

    def _headers(self, settings: Settings) -> Dict[str, str]:
        return {"x-api-key": settings.api_key or "", "anthropic-version": CLAUDE_API_VERSION}

    def _completions_url(self, settings: Settings, options: CallOptions) -> str:
        return f"{settings.base_url.rstrip('/')}/messages"

    def _build_body(self, request: CompletionRequest) -> Dict[str, Any]:
        system_prompts, chat = partition_messages(request.messages)
        body: Dict[str, Any] = {
            "model": request.model,
            "max_tokens": request.max_tokens if request.max_tokens is not None else CLAUDE_DEFAULT_MAX_TOKENS,
            "messages": chat,
            "stream": False,
        }
        if system_prompts:
            body["system"] = "\n\n".join(system_prompts)
        if request.json_schema is not None:
            tools, tool_choice = claude_structured_tools(request.json_schema, request.tools, request.tool_choice)
            body["tools"] = tools
            body["tool_choice"] = tool_choice
        else:
            if request.tools:
                body["tools"] = request.tools
            if request.tool_choice is not None:
                body["tool_choice"] = request.tool_choice
        for key, value in request.extra.items():
            body.setdefault(key, value)
        return body

    def _normalize(self, payload: Any, request: CompletionRequest) -> CompletionResponse:
        parsed = parse_payload(ClaudeMessagePayload, payload, self.provider_name, request.model)
        text = "".join(b.text or "" for b in parsed.content if b.type == "text")
        tool_uses = [b for b in parsed.content if b.type == "tool_use"]
        state = _classify(parsed.stop_reason, bool(tool_uses))

        if state is FinishState.LENGTH_LIMIT:
            raise IncompleteResponseError(INCOMPLETE_MESSAGE, self.provider_name, model=request.model, raw=payload)
        if state is FinishState.REFUSAL:
            raise RefusalError(REFUSAL_MESSAGE, self.provider_name, model=request.model, raw=payload)
        if state is FinishState.TOOL_USE:
            if request.is_structured:
                answer = _schema_answer(tool_uses, text)
                if answer is not None:
                    return CompletionResponse(content=answer)
            return CompletionResponse(content=text, tool_calls=[b.to_native() for b in tool_uses])
        if state is FinishState.STOP:
            return CompletionResponse(content=text)
        raise UnexpectedStateError(
            f"Unexpected stop_reason: {parsed.stop_reason}", self.provider_name, model=request.model, raw=payload
        )


__all__ = ["Completions", "partition_messages", "REFUSAL_MESSAGE"]
