"""Conversion of successful results into structured values."""

import json
from typing import Any

from relay_sdk.exceptions import ParseError


def to_structured(result: Any) -> Any:
    """Parse ``result`` as JSON unless the transport already decoded it.

    Args:
        result: A resolved exchange result.

    Returns:
        The parsed value, or ``result`` itself when it is not text.

    Raises:
        ParseError: If ``result`` is text that is not valid JSON.
    """
    if isinstance(result, (str, bytes, bytearray)):
        try:
            return json.loads(result)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParseError(f"Response is not valid JSON: {e}") from e
    return result
