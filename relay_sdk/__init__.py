"""Relay SDK for Python.

Describe an HTTP exchange with a config builder and get back one awaitable
result, whether it runs over the standard transport or a host-provided
request function.

Public API:
    RelayClient - Client holding base URL, credentials and host function
    get_* / post_* - Convenience functions configured from the environment
    monkey - Send a request through a host request function
"""

import logging
from logging import NullHandler
from typing import TextIO

from relay_sdk._internal.files import UploadedFile, download, upload_as_bytes, upload_as_text
from relay_sdk._internal.transport import AlternateRequestSpec, httpx_host_request, monkey
from relay_sdk._version import __version__
from relay_sdk.client import (
    RelayClient,
    get_blob,
    get_blob_with_credentials,
    get_json,
    get_json_with_credentials,
    get_relay_client,
    get_text,
    get_text_with_credentials,
    post_json,
    post_json_with_credentials,
    post_text,
    post_text_with_credentials,
)
from relay_sdk.exceptions import (
    HostError,
    NetworkFailure,
    ParseError,
    RelayError,
    TransportUnavailable,
)

__all__ = [
    "__version__",
    "add_stderr_logger",
    "AlternateRequestSpec",
    "HostError",
    "NetworkFailure",
    "ParseError",
    "RelayClient",
    "RelayError",
    "TransportUnavailable",
    "UploadedFile",
    "download",
    "get_blob",
    "get_blob_with_credentials",
    "get_json",
    "get_json_with_credentials",
    "get_relay_client",
    "get_text",
    "get_text_with_credentials",
    "httpx_host_request",
    "monkey",
    "post_json",
    "post_json_with_credentials",
    "post_text",
    "post_text_with_credentials",
    "upload_as_bytes",
    "upload_as_text",
]

logging.getLogger(__name__).addHandler(NullHandler())

_stderr_handler: "logging.StreamHandler[TextIO] | None" = None


def add_stderr_logger(level: int = logging.DEBUG) -> "logging.StreamHandler[TextIO]":
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level. Returns the handler.
    """
    global _stderr_handler
    logger = logging.getLogger(__name__)
    if _stderr_handler is None:
        _stderr_handler = logging.StreamHandler()
        _stderr_handler.setFormatter(
            logging.Formatter("[relay-sdk] %(asctime)s %(levelname)s %(message)s")
        )
        logger.addHandler(_stderr_handler)
    logger.setLevel(level)
    logger.debug("Added a stderr logging handler to logger: %s", __name__)
    return _stderr_handler
