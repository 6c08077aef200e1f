"""
CompletionRequest DTO: the provider-agnostic inputs of one completion call.

Adapters assemble this from ``Completions.create`` arguments after message
validation and hand it to their body builder. Transport controls
(timeouts, path) are kept out of it and travel in ``CallOptions``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass(frozen=True)
class CompletionRequest:
    """Normalized completion request.

    Attributes:
        model: Target model identifier (provider default already applied).
        messages: Validated, ordered messages (non-empty).
        json_schema: Optional ``{name, schema, strict?}`` for structured output.
        tools: Optional provider-native tool definitions.
        tool_choice: Optional explicit tool choice; always wins over a
            schema-forced choice.
        max_tokens: Optional generation cap.
        extra: Pass-through body parameters (temperature, top_p, ...).
    """

    model: str
    messages: List[Message]
    json_schema: Optional[Dict[str, Any]] = None
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Any] = None
    max_tokens: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_structured(self) -> bool:
        return self.json_schema is not None


__all__ = ["CompletionRequest"]
