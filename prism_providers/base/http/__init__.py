"""HTTP utilities for providers (client construction, single-POST transport)."""

from .client import build_client, build_timeout
from .transport import HttpResult, decode_json_response, post_json

__all__ = ["build_client", "build_timeout", "HttpResult", "post_json", "decode_json_response"]
