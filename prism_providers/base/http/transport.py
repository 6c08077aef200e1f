"""Single-POST transport primitive and JSON response decoding.

``post_json`` performs exactly one HTTP POST and returns the raw status and
body; it never retries and never inspects the body. ``decode_json_response``
is the shared second step for adapters: non-2xx becomes ``TransportError``,
an unparseable body becomes ``ParseError``.

Failure modes
-------------
- ``httpx.TimeoutException`` -> ``NetworkError`` with ``code=timeout``.
- Any other ``httpx.RequestError`` (refused connection, DNS, TLS) ->
  ``NetworkError`` with ``code=transport``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from ..errors import NetworkError, ParseError, TransportError
from ..logging import get_logger, normalized_log_event
from ..log_support import LogContext
from ..timeouts import resolve_timeouts
from .client import build_client

_logger = get_logger("prism.http")


@dataclass(frozen=True)
class HttpResult:
    """Raw outcome of one POST."""

    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def post_json(
    url: str,
    *,
    headers: Mapping[str, str],
    body: Mapping[str, Any],
    provider: str,
    model: Optional[str] = None,
    read_timeout: Optional[float] = None,
    open_timeout: Optional[float] = None,
) -> HttpResult:
    """POST ``body`` as JSON to ``url`` and return the status and body text.

    Parameters
    ----------
    url:
        Absolute endpoint URL.
    headers:
        Request headers; ``Content-Type: application/json`` is always set.
    body:
        JSON-serializable request payload.
    provider, model:
        Context for errors and logs.
    read_timeout, open_timeout:
        Per-call overrides in seconds; default to the process timeout config.

    Raises
    ------
    NetworkError
        The request produced no response.
    """
    read_s, open_s = resolve_timeouts(read_timeout, open_timeout)
    request_headers = {"Content-Type": "application/json", **headers}
    try:
        with build_client(read_s, open_s) as client:
            response = client.post(url, headers=request_headers, json=dict(body))
            return HttpResult(status=response.status_code, text=response.text)
    except httpx.TimeoutException as exc:
        _log_network_failure(provider, model, url, exc, timed_out=True)
        raise NetworkError(
            f"Request to {url} timed out: {exc}", provider, model=model, timed_out=True, raw=exc
        ) from exc
    except httpx.RequestError as exc:
        _log_network_failure(provider, model, url, exc, timed_out=False)
        raise NetworkError(f"Request to {url} failed: {exc}", provider, model=model, raw=exc) from exc


def decode_json_response(result: HttpResult, *, provider: str, model: Optional[str] = None) -> Any:
    """Return the parsed JSON body of a successful response.

    Raises
    ------
    TransportError
        Non-2xx status; carries the status and raw body.
    ParseError
        The body is not valid JSON.
    """
    if not result.ok:
        raise TransportError(result.status, result.text, provider, model=model)
    try:
        return json.loads(result.text)
    except ValueError as exc:
        raise ParseError(f"Failed to parse JSON response: {exc}", provider, model=model, raw=result.text) from exc


def _log_network_failure(provider: str, model: Optional[str], url: str, exc: Exception, *, timed_out: bool) -> None:
    normalized_log_event(
        _logger,
        "http.error",
        LogContext(provider=provider, model=model),
        phase="request",
        error_code="timeout" if timed_out else "transport",
        url=url,
        error=str(exc),
    )


__all__ = ["HttpResult", "post_json", "decode_json_response"]
