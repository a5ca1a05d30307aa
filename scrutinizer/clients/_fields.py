"""Typed readers for decoded JSON objects.

Missing or null keys yield the zero value of the field type. A value of the
wrong JSON type raises DecodeError.
"""

from typing import Any

from scrutinizer.exceptions import DecodeError


def _mismatch(key: str, expected: str, value: Any) -> DecodeError:
    return DecodeError(
        f"Field {key!r}: expected {expected}, got {type(value).__name__}"
    )


def get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def get_bool(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(key, "integer", value)
    return value


def get_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(key, "number", value)
    return float(value)


def get_object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _mismatch(key, "object", value)
    return value


def get_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _mismatch(key, "array", value)
    return value


def get_objects(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Read an array of objects; null entries decode as empty objects."""
    items = get_list(data, key)
    result = []
    for index, item in enumerate(items):
        if item is None:
            item = {}
        if not isinstance(item, dict):
            raise _mismatch(f"{key}[{index}]", "object", item)
        result.append(item)
    return result


def get_strings(data: dict[str, Any], key: str) -> list[str]:
    items = get_list(data, key)
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise _mismatch(f"{key}[{index}]", "string", item)
    return list(items)


def require_object(data: Any, what: str) -> dict[str, Any]:
    """Ensure a decoded top-level payload is a JSON object."""
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data
