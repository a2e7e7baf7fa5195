"""Request builders, dispatcher and transports.

Not intended for direct use; see ``relay_sdk.client`` for the public API.
"""

from relay_sdk._internal.transport.alternate import AlternateTransport, monkey
from relay_sdk._internal.transport.builders import (
    blob_request,
    form_post,
    json_post,
    json_request,
    text_request,
    with_credentials,
)
from relay_sdk._internal.transport.converter import to_structured
from relay_sdk._internal.transport.dispatcher import send
from relay_sdk._internal.transport.handle import HttpxTransportHandle
from relay_sdk._internal.transport.host import HostResponse, httpx_host_request
from relay_sdk._internal.transport.models import (
    AlternateRequestSpec,
    ConfigBuilder,
    ResponseDescriptor,
    TransportHandle,
)
from relay_sdk._internal.transport.sanitize import sanitize_host_error

__all__ = [
    "AlternateRequestSpec",
    "AlternateTransport",
    "ConfigBuilder",
    "HostResponse",
    "HttpxTransportHandle",
    "ResponseDescriptor",
    "TransportHandle",
    "blob_request",
    "form_post",
    "httpx_host_request",
    "json_post",
    "json_request",
    "monkey",
    "sanitize_host_error",
    "send",
    "text_request",
    "to_structured",
    "with_credentials",
]
