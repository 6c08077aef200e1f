"""Pytest configuration for the providers test suite.

- Every test starts without an installed configuration and without any of
  the provider environment variables, so results do not depend on the
  developer's shell.
- ``http_stub`` replaces the per-call httpx client with one backed by
  ``httpx.MockTransport``; queued responses are served in order and every
  outgoing request is recorded.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Union

import httpx
import pytest

from prism_providers.base.http import transport
from prism_providers.config import reset_config, setup
from prism_providers.config.env import (
    CONFIG_FILE_ENV,
    DEFAULT_PROVIDER_ENV,
    ENV_ALIASES,
    ENV_FIELD_MAP,
    ENV_MAP,
)

_PRISM_ENV = ("PRISM_READ_TIMEOUT_SECONDS", "PRISM_OPEN_TIMEOUT_SECONDS", "PRISM_LOG_LEVEL")


def _provider_env_vars() -> List[str]:
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for fields in ENV_FIELD_MAP.values():
        names.update(fields.values())
    names.update({DEFAULT_PROVIDER_ENV, CONFIG_FILE_ENV, *_PRISM_ENV})
    return sorted(names)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider variables and drop the process configuration around each test."""
    for name in _provider_env_vars():
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def configured() -> Any:
    """Install a configuration with credentials for every provider."""
    return setup(
        default_provider="openai",
        openai={"api_key": "sk-openai"},
        claude={"api_key": "sk-claude"},
        gemini={"api_key": "sk-gemini"},
        openrouter={"api_key": "sk-openrouter", "referer": "https://example.org", "app_title": "Prism Tests"},
        ollama={"host": "http://localhost:11434", "api_key": "sk-ollama"},
    )


Queued = Union[httpx.Response, Exception]


@dataclass
class HttpStub:
    """Serve queued responses and record outgoing requests."""

    queue: List[Queued] = field(default_factory=list)
    requests: List[httpx.Request] = field(default_factory=list)
    timeouts: List[tuple] = field(default_factory=list)

    def reply(self, payload: Any = None, *, status: int = 200, text: Optional[str] = None) -> "HttpStub":
        if text is None:
            text = json.dumps(payload)
        self.queue.append(httpx.Response(status, text=text))
        return self

    def fail(self, exc: Exception) -> "HttpStub":
        self.queue.append(exc)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.queue:
            raise AssertionError(f"unexpected request to {request.url}")
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture()
def http_stub(monkeypatch: pytest.MonkeyPatch) -> HttpStub:
    stub = HttpStub()

    def _build_client(read_seconds: float, open_seconds: float) -> httpx.Client:
        stub.timeouts.append((read_seconds, open_seconds))
        return httpx.Client(transport=httpx.MockTransport(stub.handler))

    monkeypatch.setattr(transport, "build_client", _build_client)
    return stub

