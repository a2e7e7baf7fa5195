"""Config builders for the standard transport.

A config builder receives a fresh transport handle, configures it (method,
URL, headers, response type) and returns a ``ResponseDescriptor``. Builders
never perform I/O; the exchange only starts once the dispatcher sends.
"""

import json
from typing import Any

from relay_sdk._internal.transport.models import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    ConfigBuilder,
    ResponseDescriptor,
    TransportHandle,
)


def with_credentials(builder: ConfigBuilder) -> ConfigBuilder:
    """Wrap a builder so the exchange forwards ambient credentials.

    The wrapped builder's descriptor is returned unchanged.
    """

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.with_credentials = True
        return builder(handle)

    return configure


# =============================================================================
# GET
# =============================================================================


def blob_request(url: str) -> ConfigBuilder:
    """GET ``url`` and resolve with the raw bytes."""

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.response_type = "blob"
        handle.open("GET", url)
        return ResponseDescriptor(is_text=False)

    return configure


def text_request(url: str) -> ConfigBuilder:
    """GET ``url`` and resolve with the decoded text."""

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.response_type = "text"
        handle.open("GET", url)
        return ResponseDescriptor(is_text=True)

    return configure


def json_request(url: str) -> ConfigBuilder:
    """GET ``url`` and let the transport decode the body as JSON."""

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.response_type = "json"
        handle.open("GET", url)
        return ResponseDescriptor(is_text=False)

    return configure


# =============================================================================
# POST
# =============================================================================


def form_post(url: str, text: str) -> ConfigBuilder:
    """POST an opaque form-encoded body to ``url``."""

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.open("POST", url)
        handle.set_request_header("Content-Type", FORM_CONTENT_TYPE)
        return ResponseDescriptor(is_text=True, body=text)

    return configure


def json_post(url: str, value: Any) -> ConfigBuilder:
    """POST ``value`` to ``url`` as a JSON document."""

    def configure(handle: TransportHandle) -> ResponseDescriptor:
        handle.open("POST", url)
        handle.set_request_header("Content-Type", JSON_CONTENT_TYPE)
        return ResponseDescriptor(is_text=False, body=json.dumps(value))

    return configure
