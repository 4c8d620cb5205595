"""
Value encoding for the cache table.

The ``value`` column is nullable text, so three logical states share it:
SQL NULL means ``None``, the sentinel text means ``True``, and anything
else is JSON. ``False`` goes through JSON as ``"false"``.
"""

import json
from typing import Any, Optional

TRUE_SENTINEL = "__TRUE__"


def encode_value(value: Any) -> Optional[str]:
    """Encode a logical value for storage.

    Args:
        value: str, number, bool, None, or a JSON-serializable dict/list.

    Returns:
        Text for the ``value`` column, or None for SQL NULL.

    Raises:
        TypeError: If the value is not JSON-serializable.
        ValueError: On circular references.
        RecursionError: If the value is nested too deeply.
    """
    if value is True:
        return TRUE_SENTINEL
    if value is None:
        return None
    return json.dumps(value)


def decode_value(encoded: Optional[str]) -> Any:
    """Decode a stored ``value`` column back to its logical value.

    Precedence is NULL, then sentinel, then JSON. Text that is not valid
    JSON is returned unchanged.
    """
    if encoded is None:
        return None
    if encoded == TRUE_SENTINEL:
        return True
    try:
        return json.loads(encoded)
    except (ValueError, RecursionError):
        return encoded
