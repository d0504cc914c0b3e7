"""Fast JSON decoding and encoding for page descriptors and rendered trees."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def strip_code_fence(text: str) -> str:
    """
    Remove a surrounding markdown code fence, if any.

    Descriptors pasted from docs or chat tools often arrive wrapped in
    ```json ... ``` blocks. Text that does not open with a fence is
    returned unchanged.
    """
    if not text.startswith("```"):
        return text

    if text.startswith("```json"):
        start = 7
    else:
        start = 3

    end = text.rfind("```")
    if end < start:
        return text
    return text[start:end].strip()


def decode_json(text: str, repair: bool = True) -> Any:
    """
    Decode JSON text into plain Python objects.

    The raw text is decoded first; a surrounding code fence is stripped
    only when that fails.

    Args:
        text: JSON text (object, array or null at top level)
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Decoded value (dict, list, str, number, bool or None)

    Raises:
        JSONParseError: If decoding fails
    """
    json_str = text.strip()
    if not json_str:
        raise JSONParseError("Empty JSON document")

    # Try msgspec first (fastest)
    try:
        return msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        error = e

    unfenced = strip_code_fence(json_str)
    if unfenced != json_str:
        json_str = unfenced
        try:
            return msgspec.json.decode(json_str.encode("utf-8"))
        except msgspec.DecodeError as e:
            error = e

    if not repair:
        raise JSONParseError(f"Invalid JSON: {error}", error) from error

    try:
        repaired = repair_json(json_str)
        return json.loads(repaired)
    except (ValueError, TypeError) as repair_error:
        raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error


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

        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for pretty-printed output or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size before decoding.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")
