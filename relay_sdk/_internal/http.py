"""Shared HTTP client configuration."""

import httpx

from relay_sdk._version import __version__

USER_AGENT = f"relay-sdk/{__version__}"


def create_http_client(
    *,
    base_url: str | None = None,
    cookies: httpx.Cookies | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Exchanges are never timed out, so the client is built with ``timeout=None``.

    Args:
        base_url: Optional base URL for all requests.
        cookies: Cookie jar to send with requests.
        transport: Optional transport override (e.g. ``httpx.MockTransport``).

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=None,
        base_url=base_url or "",
        cookies=cookies,
        transport=transport,
        headers={"User-Agent": USER_AGENT},
    )
