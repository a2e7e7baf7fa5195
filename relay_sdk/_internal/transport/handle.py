"""Standard transport handle backed by httpx."""

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx

from relay_sdk._internal.http import create_http_client
from relay_sdk._internal.transport.models import (
    ERROR_EVENT,
    LOAD_EVENT,
    EventName,
    ResponseType,
)
from relay_sdk._internal.transport.redaction import redact_headers
from relay_sdk._internal.transport.tasks import spawn
from relay_sdk.exceptions import RelayError

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., httpx.AsyncClient]


class HttpxTransportHandle:
    """Browser-style request handle that performs the exchange with httpx.

    Configure with ``open``/``set_request_header``, subscribe to ``load`` and
    ``error``, then ``send``. Sending schedules the request on the running
    event loop and returns immediately; exactly one event fires when it ends.

    Any non-2xx response fires ``error`` with its status code. A request that
    never got a response fires ``error`` with status 0.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        auth_token: str | None = None,
        cookies: httpx.Cookies | None = None,
        client_factory: ClientFactory = create_http_client,
    ) -> None:
        """Initialize the handle.

        Args:
            base_url: Base URL relative request URLs are resolved against.
            auth_token: Bearer token, sent only when ``with_credentials`` is set.
            cookies: Cookie jar, sent only when ``with_credentials`` is set.
            client_factory: Builds the httpx client for the exchange.
        """
        self.with_credentials = False
        self.response_type: ResponseType = ""
        self.status = 0
        self._base_url = base_url
        self._auth_token = auth_token
        self._cookies = cookies
        self._client_factory = client_factory
        self._method: str | None = None
        self._url: str | None = None
        self._headers: dict[str, str] = {}
        self._listeners: dict[str, list[Callable[[], None]]] = {
            LOAD_EVENT: [],
            ERROR_EVENT: [],
        }
        self._response: Any = None
        self._response_text = ""
        self._sent = False
        self._finished = False

    @property
    def response(self) -> Any:
        """Response body decoded according to ``response_type``."""
        return self._response

    @property
    def response_text(self) -> str:
        """Response body decoded as text."""
        return self._response_text

    def open(self, method: str, url: str) -> None:
        self._method = method.upper()
        self._url = url

    def set_request_header(self, name: str, value: str) -> None:
        self._headers[name] = value

    def add_event_listener(self, event: EventName, listener: Callable[[], None]) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event}")
        self._listeners[event].append(listener)

    def send(self, body: str | bytes | None = None) -> None:
        """Start the exchange on the running event loop.

        Raises:
            RelayError: If ``open`` was not called or the handle was already sent.
        """
        if self._method is None or self._url is None:
            raise RelayError("send() called before open()")
        if self._sent:
            raise RelayError("Request handle has already been sent")
        self._sent = True

        spawn(self._perform(body))

    async def _perform(self, body: str | bytes | None) -> None:
        headers = dict(self._headers)
        cookies = None
        if self.with_credentials:
            cookies = self._cookies
            if self._auth_token:
                headers.setdefault("Authorization", f"Bearer {self._auth_token}")

        logger.debug(
            "Sending %s %s headers=%s", self._method, self._url, redact_headers(headers)
        )
        try:
            async with self._client_factory(base_url=self._base_url, cookies=cookies) as client:
                response = await client.request(
                    self._method,  # type: ignore[arg-type]
                    self._url,  # type: ignore[arg-type]
                    headers=headers,
                    content=body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Request to %s failed: %s", self._url, e)
            self.status = 0
            self._fire(ERROR_EVENT)
            return
        except Exception:
            logger.warning("Request to %s raised unexpectedly", self._url, exc_info=True)
            self.status = 0
            self._fire(ERROR_EVENT)
            return

        self.status = response.status_code
        self._response_text = response.text
        self._response = self._decode(response)
        if response.is_success:
            logger.debug("Request to %s succeeded with status %d", self._url, self.status)
            self._fire(LOAD_EVENT)
        else:
            logger.debug("Request to %s failed with status %d", self._url, self.status)
            self._fire(ERROR_EVENT)

    def _decode(self, response: httpx.Response) -> Any:
        if self.response_type in ("blob", "arraybuffer"):
            return response.content
        if self.response_type == "json":
            try:
                return response.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                # Left as text so structured conversion reports the error.
                return response.text
        return response.text

    def _fire(self, event: str) -> None:
        if self._finished:
            return
        self._finished = True
        for listener in self._listeners[event]:
            listener()
