"""Models parts package public surface.

Re-exports the individual DTOs; `prism_providers.base.models` remains the
primary stable import path.
"""

from .message import Message, Role
from .completion_request import CompletionRequest
from .completion_response import CompletionResponse
from .finish_state import FinishState

__all__ = [
    "Message",
    "Role",
    "CompletionRequest",
    "CompletionResponse",
    "FinishState",
]
