"""Dispatcher for the standard transport."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from relay_sdk._internal.transport.handle import HttpxTransportHandle
from relay_sdk._internal.transport.models import (
    ERROR_EVENT,
    LOAD_EVENT,
    ConfigBuilder,
    TransportHandle,
)
from relay_sdk.exceptions import NetworkFailure

logger = logging.getLogger(__name__)

HandleFactory = Callable[[], TransportHandle]


def send(
    builder: ConfigBuilder,
    *,
    handle_factory: HandleFactory = HttpxTransportHandle,
) -> "asyncio.Future[Any]":
    """Run one exchange configured by ``builder``.

    The builder runs before the exchange starts, so configuration errors raise
    here rather than through the returned future. Must be called with a running
    event loop.

    Args:
        builder: Configures the handle and describes how to read the result.
        handle_factory: Creates the transport handle for this exchange.

    Returns:
        A future resolved with the response text (``is_text``) or the decoded
        response, or rejected with ``NetworkFailure`` carrying the status.
    """
    handle = handle_factory()
    descriptor = builder(handle)
    future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

    def on_load() -> None:
        if future.done():
            return
        future.set_result(handle.response_text if descriptor.is_text else handle.response)

    def on_error() -> None:
        if future.done():
            return
        logger.debug("Exchange failed with status %s", handle.status)
        future.set_exception(NetworkFailure(handle.status))

    handle.add_event_listener(LOAD_EVENT, on_load)
    handle.add_event_listener(ERROR_EVENT, on_error)
    handle.send(descriptor.body)
    return future
