"""Ollama chat and embeddings adapters."""
from __future__ import annotations

import pytest

from prism_providers.base.errors import (
    APIKeyNotConfiguredError,
    HostNotConfiguredError,
    UnexpectedStateError,
)
from prism_providers.config import setup
from prism_providers.ollama import Completions, Embeddings
from prism_providers.ollama.helpers import build_options, ollama_url
from prism_providers.config.settings import OllamaSettings
from prism_providers.tests.utils import USER_HI, ollama_payload

SCHEMA = {"name": "answer", "schema": {"type": "object", "properties": {"n": {"type": "integer"}}}}


def test_chat_request_shape(configured, http_stub):
    http_stub.reply(ollama_payload("Hello"))
    reply = Completions().create(
        [{"role": "user", "content": [{"type": "text", "text": "Hi"}, {"type": "image"}]}],
        json_schema=SCHEMA,
        max_tokens=64,
        temperature=0.2,
        tool_choice={"type": "auto"},
    )
    assert reply.content == "Hello"  # nosec B101
    assert str(http_stub.last.url) == "http://localhost:11434/api/chat"  # nosec B101
    assert http_stub.last.headers["authorization"] == "Bearer sk-ollama"  # nosec B101
    assert http_stub.last_body == {  # nosec B101
        "model": "llama3.1:8b",
        "stream": False,
        "messages": [{"role": "user", "content": "Hi\n[image]"}],
        "format": SCHEMA["schema"],
        "options": {"temperature": 0.2, "num_predict": 64},
    }


def test_tools_forwarded(configured, http_stub):
    tools = [{"type": "function", "function": {"name": "lookup"}}]
    http_stub.reply(ollama_payload("ok"))
    Completions().create(USER_HI, tools=tools)
    assert http_stub.last_body["tools"] == tools  # nosec B101
    assert "options" not in http_stub.last_body  # nosec B101


def test_path_override(configured, http_stub):
    http_stub.reply(ollama_payload("ok"))
    Completions().create(USER_HI, path="/proxy/api/chat")
    assert str(http_stub.last.url) == "http://localhost:11434/proxy/api/chat"  # nosec B101
    assert "path" not in http_stub.last_body  # nosec B101


def test_tool_calls_take_precedence(configured, http_stub):
    calls = [{"function": {"name": "lookup", "arguments": {"q": "x"}}}]
    http_stub.reply(ollama_payload("", done=False, tool_calls=calls))
    reply = Completions().create(USER_HI)
    assert reply.tool_calls == calls  # nosec B101
    assert reply.content == ""  # nosec B101


def test_not_done_is_unexpected(configured, http_stub):
    http_stub.reply(ollama_payload("partial", done=False, done_reason="length"))
    with pytest.raises(UnexpectedStateError) as info:
        Completions().create(USER_HI)
    assert info.value.message.startswith("Unexpected finish_reason: length, done: False")  # nosec B101


def test_missing_host_fails_before_network(http_stub):
    setup(ollama={"api_key": "k"})
    with pytest.raises(HostNotConfiguredError):
        Completions().create(USER_HI)
    assert http_stub.requests == []  # nosec B101


def test_missing_key_fails_when_required(http_stub):
    setup(ollama={"host": "http://localhost:11434"})
    with pytest.raises(APIKeyNotConfiguredError):
        Embeddings().create("x")
    assert http_stub.requests == []  # nosec B101


def test_key_optional_for_local_daemon(http_stub):
    setup(ollama={"host": "http://localhost:11434", "api_key_required": False})
    http_stub.reply(ollama_payload("ok"))
    Completions().create(USER_HI)
    assert "authorization" not in http_stub.last.headers  # nosec B101


def test_embeddings_request_shape(configured, http_stub):
    http_stub.reply({"embedding": [0.1, 0.2]})
    vector = Embeddings().create("hello", num_ctx=2048)
    assert vector == [0.1, 0.2]  # nosec B101
    assert str(http_stub.last.url) == "http://localhost:11434/api/embeddings"  # nosec B101
    assert http_stub.last_body == {  # nosec B101
        "model": "nomic-embed-text",
        "prompt": "hello",
        "options": {"num_ctx": 2048},
    }


def test_embeddings_path_and_param_override(configured, http_stub):
    http_stub.reply({"embedding": [1.0]})
    Embeddings().create("hello", model="mxbai-embed-large", path="api/embed", param_name="input")
    assert str(http_stub.last.url) == "http://localhost:11434/api/embed"  # nosec B101
    assert http_stub.last_body == {"model": "mxbai-embed-large", "input": "hello"}  # nosec B101


def test_embeddings_missing_vector(configured, http_stub):
    http_stub.reply({"embeddings": [[1.0]]})
    with pytest.raises(UnexpectedStateError):
        Embeddings().create("hello")


def test_explicit_settings_override_process_config(http_stub):
    settings = OllamaSettings(host="http://gpu:11434", api_key_required=False)
    http_stub.reply(ollama_payload("ok"))
    Completions(settings).create(USER_HI)
    assert str(http_stub.last.url) == "http://gpu:11434/api/chat"  # nosec B101


def test_helpers():
    settings = OllamaSettings(host="http://h:1/")
    assert ollama_url(settings, "api/chat") == "http://h:1/api/chat"  # nosec B101
    assert build_options({}) is None  # nosec B101
    assert build_options({"num_predict": 5}, max_tokens=10) == {"num_predict": 5}  # nosec B101


def test_single_block_object_flattened_to_text(configured, http_stub):
    http_stub.reply(ollama_payload("ok"))
    Completions().create([{"role": "user", "content": {"type": "text", "text": "Hi"}}])
    assert http_stub.last_body["messages"] == [{"role": "user", "content": "Hi"}]  # nosec B101
