"""Fast JSON encoding and decoding for Spec documents."""

from typing import Any
import json

import msgspec
import orjson

from .errors import JSONParseError

_decoder = msgspec.json.Decoder()


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use msgspec for compact output (very fast)
    if indent == 0:
        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None)


def loads_object(text: str | bytes) -> dict[str, Any]:
    """
    Decode a JSON document that must be an object.

    Args:
        text: JSON text

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If the text is not valid JSON or not an object
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    try:
        result = _decoder.decode(data)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result
