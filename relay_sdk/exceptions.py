"""Public exceptions for the Relay SDK."""

import json
from typing import Any


class RelayError(Exception):
    """Base exception for all Relay SDK errors."""


class NetworkFailure(RelayError):
    """The standard transport reported a failed exchange.

    Carries the transport status untouched: the HTTP status for an error
    response, or 0 when no response was received.
    """

    def __init__(self, status: int) -> None:
        super().__init__(f"Request failed with status {status}")
        self.status = status


class ParseError(RelayError, ValueError):
    """Textual response could not be decoded as JSON."""


class TransportUnavailable(RelayError):
    """The host request function required by the alternate transport is missing."""


class HostError(RelayError):
    """Failure reported by the host request function.

    Only holds plain data copied out of the host's error object, so it can be
    logged, compared and serialized without touching host internals.
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self.data = data
        super().__init__(self.__str__())

    def __str__(self) -> str:
        return json.dumps(self.data, separators=(",", ":"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostError):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(json.dumps(self.data, sort_keys=True))
