"""Provider-agnostic DTOs (stable import path).

See ``prism_providers.base.models_parts`` for the individual definitions.
"""

from .models_parts import (
    CompletionRequest,
    CompletionResponse,
    FinishState,
    Message,
    Role,
)

__all__ = [
    "Message",
    "Role",
    "CompletionRequest",
    "CompletionResponse",
    "FinishState",
]
