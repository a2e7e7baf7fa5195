"""User-facing client for sending requests through either transport.

Example usage:
    from relay_sdk import RelayClient

    client = RelayClient(auth_token="your-token")

    text = await client.get_text("https://example.com/page")
    data = await client.get_json_with_credentials("https://example.com/api/me")
    await client.post_json("https://example.com/api/items", {"name": "item"})

Module-level functions with the same names build a client from environment
variables on every call.
"""

import asyncio
import functools
import logging
import os
from collections.abc import Mapping
from typing import Any

import httpx

from relay_sdk._internal.http import create_http_client
from relay_sdk._internal.transport import (
    AlternateRequestSpec,
    AlternateTransport,
    HttpxTransportHandle,
    blob_request,
    form_post,
    json_post,
    json_request,
    send,
    text_request,
    to_structured,
    with_credentials,
)
from relay_sdk._internal.transport.dispatcher import HandleFactory
from relay_sdk._internal.transport.models import HostRequestFunction

logger = logging.getLogger(__name__)


class RelayClient:
    """Client for the standard transport and the host request function.

    Every request allocates its own transport handle; nothing is shared
    between exchanges. Credentials given here are only sent by the
    ``*_with_credentials`` methods.

    Use `RelayClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        auth_token: str | None = None,
        cookies: httpx.Cookies | None = None,
        host_request: HostRequestFunction | None = None,
        handle_factory: HandleFactory | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL relative request URLs are resolved against.
            auth_token: Bearer token forwarded by credentialed requests.
            cookies: Cookie jar forwarded by credentialed requests.
            host_request: Host request function used by ``monkey``.
            handle_factory: Overrides how transport handles are created.
            transport: httpx transport used by the default handles.
            debug: Attach a stderr handler to the package logger.
        """
        self._base_url = base_url
        self._auth_token = auth_token
        self._cookies = cookies
        self._host_request = host_request
        self._debug = debug
        if handle_factory is None:
            handle_factory = functools.partial(
                HttpxTransportHandle,
                base_url=base_url,
                auth_token=auth_token,
                cookies=cookies,
                client_factory=functools.partial(create_http_client, transport=transport),
            )
        self._handle_factory = handle_factory

        if debug:
            from relay_sdk import add_stderr_logger

            add_stderr_logger()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "RelayClient":
        """Create a client from environment variables.

        Optional environment variables:
            RELAY_BASE_URL: Base URL for relative request URLs.
            RELAY_AUTH_TOKEN: Bearer token for credentialed requests.
            RELAY_DEBUG: Set to "1" to enable debug logging to stderr.

        Args:
            **kwargs: Constructor arguments that take precedence over the
                environment (e.g. ``host_request``).

        Returns:
            A configured RelayClient.
        """
        settings: dict[str, Any] = {
            "base_url": os.environ.get("RELAY_BASE_URL") or None,
            "auth_token": os.environ.get("RELAY_AUTH_TOKEN") or None,
            "debug": os.environ.get("RELAY_DEBUG", "") == "1",
        }
        settings.update(kwargs)
        return cls(**settings)

    # =========================================================================
    # GET
    # =========================================================================

    def get_blob(self, url: str) -> "asyncio.Future[bytes]":
        """Fetch ``url`` as raw bytes."""
        return send(blob_request(url), handle_factory=self._handle_factory)

    def get_blob_with_credentials(self, url: str) -> "asyncio.Future[bytes]":
        """Fetch ``url`` as raw bytes, forwarding credentials."""
        return send(with_credentials(blob_request(url)), handle_factory=self._handle_factory)

    def get_text(self, url: str) -> "asyncio.Future[str]":
        """Fetch ``url`` as text."""
        return send(text_request(url), handle_factory=self._handle_factory)

    def get_text_with_credentials(self, url: str) -> "asyncio.Future[str]":
        """Fetch ``url`` as text, forwarding credentials."""
        return send(with_credentials(text_request(url)), handle_factory=self._handle_factory)

    async def get_json(self, url: str) -> Any:
        """Fetch ``url`` and return the decoded JSON value.

        Raises:
            NetworkFailure: If the exchange fails.
            ParseError: If the body is not valid JSON.
        """
        response = await send(json_request(url), handle_factory=self._handle_factory)
        return to_structured(response)

    async def get_json_with_credentials(self, url: str) -> Any:
        """Fetch ``url`` as JSON, forwarding credentials."""
        response = await send(
            with_credentials(json_request(url)), handle_factory=self._handle_factory
        )
        return to_structured(response)

    # =========================================================================
    # POST
    # =========================================================================

    def post_text(self, url: str, text: str) -> "asyncio.Future[Any]":
        """POST ``text`` as ``application/x-www-form-urlencoded``."""
        return send(form_post(url, text), handle_factory=self._handle_factory)

    def post_text_with_credentials(self, url: str, text: str) -> "asyncio.Future[Any]":
        """POST form-encoded ``text``, forwarding credentials."""
        return send(with_credentials(form_post(url, text)), handle_factory=self._handle_factory)

    def post_json(self, url: str, value: Any) -> "asyncio.Future[Any]":
        """POST ``value`` as ``application/json``."""
        return send(json_post(url, value), handle_factory=self._handle_factory)

    def post_json_with_credentials(self, url: str, value: Any) -> "asyncio.Future[Any]":
        """POST ``value`` as JSON, forwarding credentials."""
        return send(with_credentials(json_post(url, value)), handle_factory=self._handle_factory)

    # =========================================================================
    # Host Transport
    # =========================================================================

    def monkey(self, details: Mapping[str, Any] | AlternateRequestSpec) -> "asyncio.Future[Any]":
        """Send ``details`` through the host request function.

        Raises:
            TransportUnavailable: If the client has no host request function.
        """
        return AlternateTransport(self._host_request).request(details)


def get_relay_client(**kwargs: Any) -> RelayClient:
    """Get a client configured from environment variables.

    Returns:
        A configured RelayClient instance.
    """
    return RelayClient.from_env(**kwargs)


def get_blob(url: str) -> "asyncio.Future[bytes]":
    return get_relay_client().get_blob(url)


def get_blob_with_credentials(url: str) -> "asyncio.Future[bytes]":
    return get_relay_client().get_blob_with_credentials(url)


def get_text(url: str) -> "asyncio.Future[str]":
    return get_relay_client().get_text(url)


def get_text_with_credentials(url: str) -> "asyncio.Future[str]":
    return get_relay_client().get_text_with_credentials(url)


async def get_json(url: str) -> Any:
    return await get_relay_client().get_json(url)


async def get_json_with_credentials(url: str) -> Any:
    return await get_relay_client().get_json_with_credentials(url)


def post_text(url: str, text: str) -> "asyncio.Future[Any]":
    return get_relay_client().post_text(url, text)


def post_text_with_credentials(url: str, text: str) -> "asyncio.Future[Any]":
    return get_relay_client().post_text_with_credentials(url, text)


def post_json(url: str, value: Any) -> "asyncio.Future[Any]":
    return get_relay_client().post_json(url, value)


def post_json_with_credentials(url: str, value: Any) -> "asyncio.Future[Any]":
    return get_relay_client().post_json_with_credentials(url, value)
