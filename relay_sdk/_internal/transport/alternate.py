"""Adapter for the callback-style host request function."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from relay_sdk._internal.transport.models import AlternateRequestSpec, HostRequestFunction
from relay_sdk._internal.transport.redaction import redact_headers
from relay_sdk._internal.transport.sanitize import sanitize_host_error
from relay_sdk.exceptions import HostError, TransportUnavailable

logger = logging.getLogger(__name__)

DEFAULT_DETAILS: dict[str, Any] = {"nocache": True}


class AlternateTransport:
    """Runs exchanges through a privileged host request function.

    The host function takes a details mapping and later calls exactly one of
    ``details["onload"]`` or ``details["onerror"]``. This adapter turns that
    into a single future and normalizes host errors into ``HostError``.
    """

    def __init__(self, host_request: HostRequestFunction | None) -> None:
        """Initialize the adapter.

        Args:
            host_request: The host request function.

        Raises:
            TransportUnavailable: If ``host_request`` is missing or not callable.
        """
        if host_request is None or not callable(host_request):
            logger.error("Cannot resolve host request function")
            raise TransportUnavailable("Cannot resolve host request function")
        self._host_request = host_request

    def build_details(
        self,
        details: Mapping[str, Any] | AlternateRequestSpec,
        future: "asyncio.Future[Any]",
    ) -> dict[str, Any]:
        """Merge defaults, caller details and the completion callbacks.

        Caller fields win over defaults; the callbacks always come from here.
        """
        if isinstance(details, AlternateRequestSpec):
            details = details.model_dump()

        full_details: dict[str, Any] = {**DEFAULT_DETAILS, **details}
        full_details.setdefault("method", "GET")

        def onload(response: Any) -> None:
            if future.done():
                return
            future.set_result(_read_response(response))

        def onerror(response: Any) -> None:
            if future.done():
                return
            error = HostError(sanitize_host_error(response))
            logger.debug("Host request failed: %s", error)
            future.set_exception(error)

        full_details["onload"] = onload
        full_details["onerror"] = onerror
        return full_details

    def request(self, details: Mapping[str, Any] | AlternateRequestSpec) -> "asyncio.Future[Any]":
        """Start an exchange through the host function.

        Must be called with a running event loop.

        Args:
            details: Request details (``url`` plus optional ``method``,
                ``headers``, ``nocache`` and host-specific fields).

        Returns:
            A future resolved with the host response payload, or rejected with
            ``HostError``.
        """
        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        full_details = self.build_details(details, future)
        logger.debug(
            "Host request %s %s headers=%s",
            full_details["method"],
            full_details.get("url"),
            redact_headers(full_details.get("headers") or {}),
        )
        self._host_request(full_details)
        return future


def monkey(
    details: Mapping[str, Any] | AlternateRequestSpec,
    host_request: HostRequestFunction | None = None,
) -> "asyncio.Future[Any]":
    """Run one exchange through ``host_request``.

    Raises:
        TransportUnavailable: Immediately, if ``host_request`` is missing.
    """
    return AlternateTransport(host_request).request(details)


def _read_response(response: Any) -> Any:
    if isinstance(response, Mapping):
        return response.get("response")
    return getattr(response, "response", None)
