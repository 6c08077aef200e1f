"""Schema translation into each provider's structured-output mechanism."""
from __future__ import annotations

import copy

from prism_providers.base.structured import (
    claude_schema_tool,
    claude_structured_tools,
    ollama_format,
    openai_response_format,
    unwrap_schema,
)

SCHEMA = {
    "name": "weather",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {"city": {"type": "string"}, "temp_c": {"type": "number"}},
        "required": ["city", "temp_c"],
    },
}

LOOKUP_TOOL = {"name": "lookup", "description": "Find a city", "input_schema": {"type": "object"}}


def test_openai_response_format_wraps_schema():
    assert openai_response_format(SCHEMA) == {"type": "json_schema", "json_schema": SCHEMA}  # nosec B101


def test_ollama_format_uses_inner_schema():
    assert ollama_format(SCHEMA) == SCHEMA["schema"]  # nosec B101


def test_ollama_format_accepts_raw_schema():
    raw = {"type": "object", "properties": {}}
    assert ollama_format(raw) == raw  # nosec B101


def test_unwrap_schema_removes_wrapper():
    assert unwrap_schema({"json_schema": SCHEMA}) == SCHEMA  # nosec B101


def test_claude_schema_tool_uses_name_and_inner_schema():
    tool = claude_schema_tool(SCHEMA)
    assert tool["name"] == "weather"  # nosec B101
    assert tool["input_schema"] == SCHEMA["schema"]  # nosec B101
    assert tool["description"]  # nosec B101


def test_claude_schema_tool_default_name_for_raw_schema():
    tool = claude_schema_tool({"type": "object"})
    assert tool["name"] == "structured_output"  # nosec B101
    assert tool["input_schema"] == {"type": "object"}  # nosec B101


def test_claude_tools_prepend_schema_tool_and_force_choice():
    tools, choice = claude_structured_tools(SCHEMA, [LOOKUP_TOOL])
    assert [t["name"] for t in tools] == ["weather", "lookup"]  # nosec B101
    assert choice == {"type": "tool", "name": "weather"}  # nosec B101


def test_explicit_tool_choice_wins():
    explicit = {"type": "tool", "name": "lookup"}
    _, choice = claude_structured_tools(SCHEMA, [LOOKUP_TOOL], explicit)
    assert choice == explicit  # nosec B101


def test_translators_do_not_mutate_inputs():
    schema = copy.deepcopy(SCHEMA)
    tools = [copy.deepcopy(LOOKUP_TOOL)]
    merged, _ = claude_structured_tools(schema, tools)
    merged[0]["input_schema"]["properties"]["extra"] = {"type": "string"}
    merged[1]["name"] = "renamed"
    fmt = openai_response_format(schema)
    fmt["json_schema"]["name"] = "changed"
    assert schema == SCHEMA  # nosec B101
    assert tools == [LOOKUP_TOOL]  # nosec B101


def test_translators_are_idempotent():
    assert claude_structured_tools(SCHEMA, [LOOKUP_TOOL]) == claude_structured_tools(SCHEMA, [LOOKUP_TOOL])  # nosec B101
    assert ollama_format(SCHEMA) == ollama_format(SCHEMA)  # nosec B101
    assert openai_response_format(SCHEMA) == openai_response_format(SCHEMA)  # nosec B101


def test_openai_response_format_embeds_input_verbatim():
    wrapped = {"json_schema": SCHEMA}
    assert openai_response_format(wrapped) == {"type": "json_schema", "json_schema": wrapped}  # nosec B101
    assert ollama_format(wrapped) == SCHEMA["schema"]  # nosec B101
    assert claude_schema_tool(wrapped)["name"] == "weather"  # nosec B101
