"""
Pydantic DTOs and the boundary validator for inbound chat messages.

Purpose
-------
Every adapter validates messages with :func:`validate_messages` before
building a request body, so all providers share one strict policy:

- ``messages`` must be a non-empty list or tuple;
- each item is a :class:`Message` or a mapping with ``role`` and ``content``;
- ``role`` is one of ``system``, ``user``, ``assistant``;
- ``content`` is a non-blank string, a non-empty block mapping or a
  non-empty list of block mappings.

External dependencies: Pydantic only. No I/O.

Failure modes
-------------
Violations raise the package :class:`ValidationError` (not pydantic's),
tagged with the provider and the offending index, before any network call.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..models import Message, Role


class MessageDTO(BaseModel):
    """Structural check for a single message."""

    model_config = ConfigDict(extra="ignore")

    role: Role
    content: Union[StrictStr, Dict[str, Any], List[Dict[str, Any]]]

    @model_validator(mode="after")
    def _validate_content(self) -> "MessageDTO":
        content = self.content
        if isinstance(content, str):
            if content.strip() == "":
                raise ValueError("content string must be non-empty")
            return self
        if isinstance(content, dict):
            if not content:
                raise ValueError("content block must be a non-empty object")
            return self
        if not content:
            raise ValueError("content blocks must be a non-empty list")
        return self

    def to_message(self) -> Message:
        return Message(role=self.role, content=self.content)


def _as_mapping(item: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(item, Message):
        return {"role": item.role, "content": item.content}
    if isinstance(item, Mapping):
        return item
    return None


def validate_messages(messages: Any, provider: str, model: Optional[str] = None) -> List[Message]:
    """Validate caller messages and return them as :class:`Message` instances.

    Raises
    ------
    ValidationError
        When the sequence is empty or not a list, or any message violates
        the role/content rules.
    """
    if not isinstance(messages, (list, tuple)) or not messages:
        raise ValidationError("messages must be a non-empty list of {role, content} objects", provider, model=model)
    validated: List[Message] = []
    for index, item in enumerate(messages):
        data = _as_mapping(item)
        if data is None:
            raise ValidationError(
                f"messages[{index}] must be a mapping with 'role' and 'content', got {type(item).__name__}",
                provider,
                model=model,
            )
        try:
            validated.append(MessageDTO.model_validate(dict(data)).to_message())
        except PydanticValidationError as exc:
            raise ValidationError(f"messages[{index}] is invalid: {exc}", provider, model=model, raw=exc) from exc
    return validated


def validate_text(text: Any, provider: str, model: Optional[str] = None) -> str:
    """Return ``text`` when it is a non-blank string; raise ``ValidationError`` otherwise."""
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("text must be a non-empty string", provider, model=model)
    return text


__all__ = ["MessageDTO", "validate_messages", "validate_text"]
