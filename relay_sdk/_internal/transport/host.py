"""Host request function backed by httpx.

Gives the alternate transport a callback-style host to talk to when no
userscript sandbox provides one.
"""

import json
import logging
from typing import Any

import httpx

from relay_sdk._internal.http import create_http_client
from relay_sdk._internal.transport.tasks import spawn

logger = logging.getLogger(__name__)

NOCACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}

READY_STATE_DONE = 4


class HostResponse:
    """Response object handed to ``onload``/``onerror``.

    Data attributes use the host's camelCase names. ``abort`` is a no-op
    callable kept for parity with the userscript host's response object.
    """

    def __init__(
        self,
        *,
        final_url: str,
        status: int = 0,
        status_text: str = "",
        response_headers: str = "",
        response: Any = None,
        response_text: str = "",
        error: str | None = None,
    ) -> None:
        self.finalUrl = final_url
        self.readyState = READY_STATE_DONE
        self.status = status
        self.statusText = status_text
        self.responseHeaders = response_headers
        self.response = response
        self.responseText = response_text
        if error is not None:
            self.error = error

    def abort(self) -> None:
        """The exchange is already finished, so there is nothing to abort."""


def httpx_host_request(details: dict[str, Any]) -> None:
    """Perform ``details`` with httpx and report through its callbacks.

    Supported details: ``method``, ``url``, ``headers``, ``data``,
    ``responseType`` (``"json"``, ``"arraybuffer"``, ``"blob"`` or text),
    and ``nocache``. Every HTTP response goes to ``onload``;
    only a failure to get a response goes to ``onerror``.

    Must be called with a running event loop.
    """
    spawn(_perform(details))


async def _perform(details: dict[str, Any]) -> None:
    url = details.get("url")
    try:
        if not url:
            raise ValueError("Request details have no url")
        method = str(details.get("method") or "GET").upper()
        headers = dict(details.get("headers") or {})
        if details.get("nocache"):
            for name, value in NOCACHE_HEADERS.items():
                headers.setdefault(name, value)

        async with create_http_client() as client:
            response = await client.request(
                method,
                url,
                headers=headers,
                content=details.get("data"),
            )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Host request to %s failed: %s", url, e)
        details["onerror"](HostResponse(final_url=str(url), error=str(e)))
        return
    except Exception as e:
        logger.warning("Host request to %s raised unexpectedly", url, exc_info=True)
        details["onerror"](HostResponse(final_url=str(url or ""), error=str(e)))
        return

    details["onload"](
        HostResponse(
            final_url=str(response.url),
            status=response.status_code,
            status_text=response.reason_phrase,
            response_headers=_format_headers(response.headers),
            response=_decode(response, details.get("responseType")),
            response_text=response.text,
        )
    )


def _decode(response: httpx.Response, response_type: str | None) -> Any:
    if response_type in ("arraybuffer", "blob"):
        return response.content
    if response_type == "json":
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
    return response.text


def _format_headers(headers: httpx.Headers) -> str:
    return "".join(f"{name}: {value}\r\n" for name, value in headers.items())
