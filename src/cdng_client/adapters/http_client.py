"""httpx wrapper.

Every request to the backend goes through `build_client`, so timeout,
redirects, TLS policy and authentication headers are decided in one place.
"""

from __future__ import annotations

import httpx

from cdng_client.core.domain.models import ClientConfig


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def build_client(
    config: ClientConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` for a single call.

    The caller owns the client and must close it (use it as a context manager).
    `transport` replaces the network layer, e.g. with `httpx.MockTransport`.
    """

    return httpx.Client(
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        verify=config.verify_tls,
        headers=build_headers(config.api_key),
        transport=transport,
    )
