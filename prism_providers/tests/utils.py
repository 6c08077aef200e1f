"""Shared payload builders and assertion helpers for adapter tests."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional


def openai_style_payload(
    content: Any = "Hello",
    *,
    finish_reason: Optional[str] = "stop",
    refusal: Any = None,
    tool_calls: Any = None,
    function_call: Any = None,
) -> dict:
    """Build an OpenAI-compatible chat completion body."""
    message: dict = {"role": "assistant", "content": content}
    if refusal is not None:
        message["refusal"] = refusal
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    if function_call is not None:
        message["function_call"] = function_call
    return {"id": "cmpl-1", "choices": [{"index": 0, "message": message, "finish_reason": finish_reason}]}


def claude_payload(*blocks: dict, stop_reason: Optional[str] = "end_turn") -> dict:
    return {"id": "msg_1", "type": "message", "role": "assistant", "content": list(blocks), "stop_reason": stop_reason}


def ollama_payload(content: Optional[str] = "Hello", *, done: Any = True, done_reason: Optional[str] = "stop", tool_calls: Any = None) -> dict:
    message: dict = {"role": "assistant", "content": content}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    return {"model": "llama3.1:8b", "message": message, "done": done, "done_reason": done_reason}


class ListHandler(logging.Handler):
    """Capture formatted log messages into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []
        self.levels: List[int] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())
        self.levels.append(record.levelno)

    def events(self) -> List[dict]:
        return [json.loads(m) for m in self.messages]


USER_HI = [{"role": "user", "content": "Hi"}]
