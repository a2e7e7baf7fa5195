"""Normalization of host error objects into plain data.

The host request function reports failures with an object that mixes data
fields with callable members. Only the fields listed in ``HOST_ERROR_FIELDS``
are copied out, and callables are dropped wherever they appear.
"""

from collections.abc import Mapping
from typing import Any

HOST_ERROR_FIELDS: tuple[str, ...] = (
    "error",
    "finalUrl",
    "readyState",
    "responseHeaders",
    "responseText",
    "status",
    "statusText",
)

_MISSING = object()


def sanitize_host_error(value: Any) -> dict[str, Any]:
    """Copy the allow-listed data fields out of a host error object.

    Fields are read from mapping keys or attributes. The input is never
    mutated.

    Args:
        value: The object handed to the host's ``onerror`` callback.

    Returns:
        A new dictionary containing only plain data.
    """
    result: dict[str, Any] = {}
    for name in HOST_ERROR_FIELDS:
        field = _read_field(value, name)
        if field is _MISSING or callable(field):
            continue
        result[name] = _copy_data(field)
    return result


def _read_field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    return getattr(value, name, _MISSING)


def _copy_data(obj: Any) -> Any:
    """Deep-copy JSON-compatible data, dropping callables."""
    if isinstance(obj, Mapping):
        return {
            str(key): _copy_data(item)
            for key, item in obj.items()
            if not callable(item)
        }
    elif isinstance(obj, (list, tuple)):
        return [_copy_data(item) for item in obj if not callable(item)]
    elif obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    elif isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    else:
        return str(obj)
