"""
Message DTO used across providers.

Content is plain text, a single provider-native content block, or a list of
blocks (``{"type": "text", "text": ...}``, image blocks, ...). Blocks are passed
through unmodified to providers that accept them; ``text_or_joined`` gives
the flattened view for providers that only take strings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A validated chat message.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text, one content block mapping or a list of them.
    """

    role: Role
    content: Union[str, Dict[str, Any], List[Dict[str, Any]]]

    def is_structured(self) -> bool:
        """Return True if the content is a block or a list of blocks."""
        return not isinstance(self.content, str)

    def text_or_joined(self) -> str:
        """Return a plain-text view of the content.

        Text blocks contribute their ``text``; other blocks are represented by
        a bracketed type token (``[image]``). Parts are joined with newlines.
        """
        if isinstance(self.content, str):
            return self.content
        blocks = [self.content] if isinstance(self.content, dict) else self.content
        parts: List[str] = []
        for block in blocks:
            text = block.get("text") if isinstance(block, dict) else None
            if isinstance(text, str) and text:
                parts.append(text)
            else:
                kind = block.get("type", "block") if isinstance(block, dict) else "block"
                parts.append(f"[{kind}]")
        return "\n".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{role, content}`` wire shape shared by OpenAI-style and Claude APIs."""
        return {"role": self.role, "content": self.content}


__all__ = ["Message", "Role"]
