"""Translate a caller JSON schema into each provider's structured-output mechanism.

Pure, side-effect-free helpers. Inputs are deep-copied so neither the
caller's schema nor the caller's tool list is ever mutated, and calling a
translator twice with the same arguments yields equal results.

Accepted schema forms:

- ``{"name": ..., "schema": {...}, "strict": ...}``
- a raw JSON schema object (``{"type": "object", ...}``)
- ``{"json_schema": {...}}`` wrapper around the first form; only the Ollama
  and Claude translators unwrap it. ``openai_response_format`` embeds its
  input verbatim.

Provider mechanisms:

- OpenAI / Gemini / OpenRouter: ``response_format = {"type": "json_schema",
  "json_schema": <schema>}``.
- Ollama: ``format = <schema["schema"]>`` or the object as-is.
- Claude: a synthesized tool forced through ``tool_choice``.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config.defaults import CLAUDE_SCHEMA_TOOL_DESCRIPTION, CLAUDE_SCHEMA_TOOL_NAME


def unwrap_schema(json_schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a deep copy with any ``{"json_schema": ...}`` wrapper removed."""
    inner = json_schema.get("json_schema") if isinstance(json_schema, Mapping) else None
    if isinstance(inner, Mapping):
        return copy.deepcopy(dict(inner))
    return copy.deepcopy(dict(json_schema))


def openai_response_format(json_schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the ``response_format`` value for OpenAI-compatible chat APIs."""
    return {"type": "json_schema", "json_schema": copy.deepcopy(dict(json_schema))}


def ollama_format(json_schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the raw schema Ollama expects under ``format``."""
    schema = unwrap_schema(json_schema)
    inner = schema.get("schema")
    return inner if isinstance(inner, dict) else schema


def claude_schema_tool(json_schema: Mapping[str, Any]) -> Dict[str, Any]:
    """Synthesize the tool definition that makes Claude answer in schema form."""
    schema = unwrap_schema(json_schema)
    name = schema.get("name")
    if not isinstance(name, str) or not name:
        name = CLAUDE_SCHEMA_TOOL_NAME
    inner = schema.get("schema")
    input_schema = inner if isinstance(inner, dict) else schema
    return {
        "name": name,
        "description": CLAUDE_SCHEMA_TOOL_DESCRIPTION,
        "input_schema": input_schema,
    }


def claude_structured_tools(
    json_schema: Mapping[str, Any],
    tools: Optional[List[Dict[str, Any]]] = None,
    tool_choice: Optional[Any] = None,
) -> Tuple[List[Dict[str, Any]], Any]:
    """Return ``(tools, tool_choice)`` for a schema-constrained Claude request.

    The schema tool is prepended to the caller's tools. ``tool_choice`` is
    forced to the schema tool unless the caller supplied one, which is
    returned verbatim.
    """
    tool = claude_schema_tool(json_schema)
    merged = [tool] + copy.deepcopy(list(tools or []))
    if tool_choice is not None:
        choice = copy.deepcopy(tool_choice)
    else:
        choice = {"type": "tool", "name": tool["name"]}
    return merged, choice


__all__ = [
    "unwrap_schema",
    "openai_response_format",
    "ollama_format",
    "claude_schema_tool",
    "claude_structured_tools",
]
