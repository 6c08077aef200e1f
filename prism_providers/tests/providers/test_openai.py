"""OpenAI completions and embeddings against a stubbed HTTP transport."""
from __future__ import annotations

import pytest

from prism_providers.base.errors import (
    APIKeyNotConfiguredError,
    ContentFilteredError,
    IncompleteResponseError,
    ParseError,
    RefusalError,
    TransportError,
    UnexpectedStateError,
    ValidationError,
)
from prism_providers.base.openai_style_parts import CONTENT_FILTERED_MESSAGE, INCOMPLETE_MESSAGE
from prism_providers.openai import Completions, Embeddings, OpenAIProvider
from prism_providers.tests.utils import USER_HI, openai_style_payload

SCHEMA = {"name": "answer", "schema": {"type": "object", "properties": {"value": {"type": "integer"}}}}


def test_create_posts_to_chat_completions(configured, http_stub):
    http_stub.reply(openai_style_payload("Hello there"))
    reply = Completions().create(USER_HI)
    assert reply.content == "Hello there"  # nosec B101
    assert reply.tool_calls is None  # nosec B101
    assert reply.to_dict() == {"content": "Hello there"}  # nosec B101
    assert str(http_stub.last.url) == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert http_stub.last.headers["authorization"] == "Bearer sk-openai"  # nosec B101
    assert http_stub.last_body == {"model": "gpt-4o-mini", "messages": USER_HI, "stream": False}  # nosec B101


def test_body_carries_schema_tools_and_passthrough(configured, http_stub):
    tools = [{"type": "function", "function": {"name": "lookup", "parameters": {"type": "object"}}}]
    http_stub.reply(openai_style_payload('{"value": 4}'))
    Completions().create(
        USER_HI,
        model="gpt-4o",
        json_schema=SCHEMA,
        tools=tools,
        tool_choice="auto",
        max_tokens=50,
        temperature=0.1,
        read_timeout=9,
    )
    body = http_stub.last_body
    assert body["model"] == "gpt-4o"  # nosec B101
    assert body["response_format"] == {"type": "json_schema", "json_schema": SCHEMA}  # nosec B101
    assert body["tools"] == tools  # nosec B101
    assert body["tool_choice"] == "auto"  # nosec B101
    assert body["max_tokens"] == 50  # nosec B101
    assert body["temperature"] == 0.1  # nosec B101
    assert "read_timeout" not in body  # nosec B101
    assert http_stub.timeouts[-1][0] == 9.0  # nosec B101


def test_passthrough_never_replaces_core_keys(configured, http_stub):
    http_stub.reply(openai_style_payload())
    Completions().create(USER_HI, json_schema=SCHEMA, response_format={"type": "json_object"}, stream=False)
    assert http_stub.last_body["response_format"]["type"] == "json_schema"  # nosec B101
    assert http_stub.last_body["stream"] is False  # nosec B101


def test_tool_calls_returned_with_content(configured, http_stub):
    calls = [{"id": "call_1", "type": "function", "function": {"name": "lookup", "arguments": "{}"}}]
    http_stub.reply(openai_style_payload(None, finish_reason="tool_calls", tool_calls=calls))
    reply = Completions().create(USER_HI)
    assert reply.tool_calls == calls  # nosec B101
    assert reply.content is None  # nosec B101
    assert reply.to_dict() == {"content": None, "tool_calls": calls}  # nosec B101


def test_legacy_function_call(configured, http_stub):
    call = {"name": "lookup", "arguments": "{}"}
    http_stub.reply(openai_style_payload(None, finish_reason="function_call", function_call=call))
    assert Completions().create(USER_HI).tool_calls == [call]  # nosec B101


@pytest.mark.parametrize("reason", ["length", "model_length"])
def test_length_limit_raises_incomplete(configured, http_stub, reason):
    http_stub.reply(openai_style_payload("partial", finish_reason=reason))
    with pytest.raises(IncompleteResponseError) as info:
        Completions().create(USER_HI)
    assert info.value.message == INCOMPLETE_MESSAGE  # nosec B101


def test_content_filter(configured, http_stub):
    http_stub.reply(openai_style_payload(None, finish_reason="content_filter"))
    with pytest.raises(ContentFilteredError) as info:
        Completions().create(USER_HI)
    assert info.value.message == CONTENT_FILTERED_MESSAGE  # nosec B101


def test_refusal_checked_before_finish_reason(configured, http_stub):
    http_stub.reply(openai_style_payload(None, finish_reason="stop", refusal="I can't help with that."))
    with pytest.raises(RefusalError) as info:
        Completions().create(USER_HI)
    assert "I can't help with that." in info.value.message  # nosec B101


def test_unknown_finish_reason(configured, http_stub):
    http_stub.reply(openai_style_payload("x", finish_reason="weird"))
    with pytest.raises(UnexpectedStateError) as info:
        Completions().create(USER_HI)
    assert info.value.message == "Unexpected finish_reason: weird"  # nosec B101


def test_missing_choices(configured, http_stub):
    http_stub.reply({"id": "x", "choices": []})
    with pytest.raises(UnexpectedStateError):
        Completions().create(USER_HI)


def test_http_error_surfaces_status_and_body(configured, http_stub):
    http_stub.reply(text='{"error": {"message": "Incorrect API key"}}', status=401)
    with pytest.raises(TransportError) as info:
        Completions().create(USER_HI)
    assert info.value.status == 401  # nosec B101
    assert "Incorrect API key" in info.value.body  # nosec B101


def test_invalid_json_body(configured, http_stub):
    http_stub.reply(text="not json")
    with pytest.raises(ParseError):
        Completions().create(USER_HI)


def test_missing_key_fails_before_network(http_stub):
    with pytest.raises(APIKeyNotConfiguredError):
        Completions().create(USER_HI)
    assert http_stub.requests == []  # nosec B101


def test_invalid_messages_fail_before_network(configured, http_stub):
    with pytest.raises(ValidationError):
        Completions().create([{"role": "user", "content": ""}])
    assert http_stub.requests == []  # nosec B101


def test_embeddings_returns_first_vector(configured, http_stub):
    http_stub.reply({"object": "list", "data": [{"index": 0, "embedding": [0.1, 0.2, 0.3]}]})
    vector = Embeddings().create("hello world", dimensions=3)
    assert vector == [0.1, 0.2, 0.3]  # nosec B101
    assert str(http_stub.last.url) == "https://api.openai.com/v1/embeddings"  # nosec B101
    assert http_stub.last_body == {  # nosec B101
        "model": "text-embedding-3-small",
        "input": "hello world",
        "dimensions": 3,
    }


def test_embeddings_empty_data(configured, http_stub):
    http_stub.reply({"data": []})
    with pytest.raises(UnexpectedStateError):
        Embeddings().create("hello")


def test_embeddings_reject_blank_text(configured, http_stub):
    with pytest.raises(ValidationError):
        Embeddings().create("   ")
    assert http_stub.requests == []  # nosec B101


def test_base_url_override(http_stub):
    from prism_providers.config import setup

    setup(openai={"api_key": "k", "base_url": "https://proxy.local/v1/"})
    http_stub.reply(openai_style_payload())
    OpenAIProvider().completions.create(USER_HI)
    assert str(http_stub.last.url) == "https://proxy.local/v1/chat/completions"  # nosec B101


def test_stream_flag_cannot_enable_streaming(configured, http_stub):
    http_stub.reply(openai_style_payload())
    Completions().create(USER_HI, stream=True, temperature=0)
    assert http_stub.last_body["stream"] is False  # nosec B101
    assert http_stub.last_body["temperature"] == 0  # nosec B101
