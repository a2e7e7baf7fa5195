"""Pydantic models and protocols for the transport layer."""

from collections.abc import Callable
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

LOAD_EVENT = "load"
ERROR_EVENT = "error"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

ResponseType = Literal["", "text", "blob", "arraybuffer", "json"]
EventName = Literal["load", "error"]

# =============================================================================
# Standard Transport
# =============================================================================


class TransportHandle(Protocol):
    """Mutable handle for a single in-flight exchange.

    Mirrors the shape of a browser request object: configure it with
    ``open``/``set_request_header``/``with_credentials``/``response_type``,
    subscribe to ``load`` and ``error``, then ``send``. Exactly one of the two
    events fires per exchange.
    """

    with_credentials: bool
    response_type: ResponseType
    status: int

    @property
    def response(self) -> Any: ...

    @property
    def response_text(self) -> str: ...

    def open(self, method: str, url: str) -> None: ...

    def set_request_header(self, name: str, value: str) -> None: ...

    def add_event_listener(self, event: EventName, listener: Callable[[], None]) -> None: ...

    def send(self, body: str | bytes | None = None) -> None: ...


class ResponseDescriptor(BaseModel):
    """What a config builder tells the dispatcher about the exchange.

    Fields:
        is_text: Resolve with the handle's text instead of its decoded response.
        body: Request body to send, if any.
    """

    model_config = ConfigDict(frozen=True)

    is_text: bool = True
    body: str | bytes | None = None


ConfigBuilder = Callable[[TransportHandle], ResponseDescriptor]

# =============================================================================
# Alternate Transport
# =============================================================================


class AlternateRequestSpec(BaseModel):
    """Request details passed to the host request function.

    Unknown fields (``data``, ``responseType``, ``anonymous``...) are kept and
    forwarded to the host as-is. ``onload``/``onerror`` are always supplied by
    the adapter.
    """

    model_config = ConfigDict(extra="allow")

    method: str = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    nocache: bool = True


HostCallback = Callable[[Any], None]
HostRequestFunction = Callable[[dict[str, Any]], Any]
