"""HTTP client construction for provider calls.

Purpose:
    Build the ``httpx.Client`` used for a single adapter call. Clients are
    not pooled: each call opens one client, performs one request and closes
    it, so no state is shared between concurrent calls.

External dependencies:
    - ``httpx`` for the synchronous HTTP client.

Timeout strategy:
    - ``open`` bounds connection establishment (and pool acquisition); ``read``
      bounds every wait for response bytes and, like ``write``, is applied to
      the request upload as well. Values come from
      :func:`prism_providers.base.timeouts.resolve_timeouts`.

Redirects:
    - Redirects are never followed; a 3xx is returned to the caller like
      any other non-2xx status.
"""

from __future__ import annotations

import httpx


def build_timeout(read_seconds: float, open_seconds: float) -> httpx.Timeout:
    """Return an ``httpx.Timeout`` with separate connect and read bounds."""
    return httpx.Timeout(read_seconds, connect=open_seconds, pool=open_seconds)


def build_client(read_seconds: float, open_seconds: float) -> httpx.Client:
    """Create a fresh client for one call. Callers own closing it."""
    return httpx.Client(timeout=build_timeout(read_seconds, open_seconds), follow_redirects=False)


__all__ = ["build_timeout", "build_client"]
