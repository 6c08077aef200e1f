"""
Logical completion states every provider's finish signal is mapped onto.

Only ``STOP`` and ``TOOL_USE`` produce a response; the other states raise the
matching error from the taxonomy.
"""
from __future__ import annotations

from enum import Enum


class FinishState(str, Enum):
    STOP = "stop"
    LENGTH_LIMIT = "length_limit"
    CONTENT_FILTERED = "content_filtered"
    REFUSAL = "refusal"
    TOOL_USE = "tool_use"
    UNEXPECTED = "unexpected"


__all__ = ["FinishState"]
