"""Redaction of sensitive request headers before they reach the logs."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "api_key",
    "token",
    "auth_token",
    "access_token",
    "refresh_token",
    "password",
    "secret",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``headers`` with sensitive values replaced.

    Matching is case-insensitive. The original mapping is never mutated.

    Args:
        headers: Header names to values.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_KEYS else value
        for name, value in headers.items()
    }
