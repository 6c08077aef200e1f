"""Gemini through Google's OpenAI-compatible endpoint."""
from __future__ import annotations

import pytest

from prism_providers.base.errors import IncompleteResponseError, ValidationError
from prism_providers.gemini import Completions, Embeddings
from prism_providers.tests.utils import USER_HI, openai_style_payload

BASE = "https://generativelanguage.googleapis.com/v1beta/openai"


def test_completion_uses_openai_compatible_endpoint(configured, http_stub):
    http_stub.reply(openai_style_payload("Hi!"))
    reply = Completions().create(USER_HI)
    assert reply.content == "Hi!"  # nosec B101
    assert str(http_stub.last.url) == f"{BASE}/chat/completions"  # nosec B101
    assert http_stub.last.headers["authorization"] == "Bearer sk-gemini"  # nosec B101
    assert http_stub.last_body["model"] == "gemini-2.5-flash"  # nosec B101


def test_last_message_must_be_user(configured, http_stub):
    with pytest.raises(ValidationError) as info:
        Completions().create(
            [{"role": "user", "content": "Hi"}, {"role": "assistant", "content": "Hello"}]
        )
    assert info.value.message == "Gemini: the last message must have role 'user'. Got 'assistant'."  # nosec B101
    assert http_stub.requests == []  # nosec B101


def test_length_limit(configured, http_stub):
    http_stub.reply(openai_style_payload("cut", finish_reason="length"))
    with pytest.raises(IncompleteResponseError):
        Completions().create(USER_HI)


def test_embeddings(configured, http_stub):
    http_stub.reply({"data": [{"embedding": [1.0, 2.0]}]})
    assert Embeddings().create("text") == [1.0, 2.0]  # nosec B101
    assert str(http_stub.last.url) == f"{BASE}/embeddings"  # nosec B101
    assert http_stub.last_body == {"model": "gemini-embedding-001", "input": "text"}  # nosec B101
