"""
CompletionResponse: the common result contract of ``Completions.create``.

``content`` is the assistant's answer: a string, ``None``, or, when a JSON
schema was requested and the provider answered through a single structured
tool invocation, the parsed object/array itself. ``tool_calls`` is set only
when the model invoked tools and schema normalization did not consume them;
entries keep the provider's native shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CompletionResponse:
    content: Any = None
    tool_calls: Optional[List[Dict[str, Any]]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return ``{"content": ...}`` plus ``"tool_calls"`` only when present."""
        out: Dict[str, Any] = {"content": self.content}
        if self.tool_calls is not None:
            out["tool_calls"] = self.tool_calls
        return out


__all__ = ["CompletionResponse"]
