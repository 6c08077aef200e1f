"""
Per-call transport controls separated from request-body parameters.

``CallOptions`` names every key that steers the call itself rather than the
model. :func:`split_call_options` partitions the caller's keyword arguments:
keys that are fields of ``CallOptions`` never reach a request body, and all
remaining keys form the pass-through bag (``temperature``, ``top_p`` ...).
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError


class CallOptions(BaseModel):
    """Transport controls for one call.

    Attributes:
        read_timeout: Read timeout override in seconds.
        open_timeout: Connect timeout override in seconds.
        path: Request path override (Ollama only; ignored elsewhere).
        param_name: Body key carrying the input text (Ollama embeddings only).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    read_timeout: Optional[float] = Field(default=None, gt=0)
    open_timeout: Optional[float] = Field(default=None, gt=0)
    path: Optional[str] = Field(default=None, min_length=1)
    param_name: Optional[str] = Field(default=None, min_length=1)


CONTROL_KEYS = frozenset(CallOptions.model_fields)


def split_call_options(
    kwargs: Mapping[str, Any], provider: str, model: Optional[str] = None
) -> Tuple[CallOptions, Dict[str, Any]]:
    """Split ``kwargs`` into ``(CallOptions, passthrough)``.

    Raises
    ------
    ValidationError
        A control key has an invalid value (e.g. a negative timeout).
    """
    controls = {k: v for k, v in kwargs.items() if k in CONTROL_KEYS and v is not None}
    passthrough = {k: v for k, v in kwargs.items() if k not in CONTROL_KEYS}
    try:
        options = CallOptions(**controls)
    except PydanticValidationError as exc:
        raise ValidationError(f"invalid call options: {exc}", provider, model=model, raw=exc) from exc
    return options, passthrough


__all__ = ["CallOptions", "CONTROL_KEYS", "split_call_options"]
