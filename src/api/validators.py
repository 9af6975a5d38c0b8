"""
Assertion helpers for API responses.

Each validator checks one property and raises AssertionError on the first
violation, naming the expected and actual values. Type names follow the JSON
vocabulary: string, number, boolean, object, array, null.
"""
import json
import re
from datetime import timedelta
from typing import Any, Iterable, Mapping, Optional, Pattern, Sequence, Union

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

_MISSING = object()


def json_type(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def json_equal(actual: Any, expected: Any) -> bool:
    """Deep equality that also requires matching JSON types (true is not 1)."""
    if json_type(actual) != json_type(expected):
        return False
    if isinstance(expected, Mapping):
        return actual.keys() == expected.keys() and all(json_equal(actual[k], expected[k]) for k in expected)
    if isinstance(expected, (list, tuple)):
        return len(actual) == len(expected) and all(json_equal(a, e) for a, e in zip(actual, expected))
    return actual == expected


def _json_in(value: Any, candidates: Iterable[Any]) -> bool:
    return any(json_equal(value, candidate) for candidate in candidates)


def _fail(message: str, expected: Any, actual: Any) -> None:
    raise AssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def _field(response: Mapping[str, Any], field_name: str) -> Any:
    if not isinstance(response, Mapping):
        _fail("Response is not an object", "object", json_type(response))
    return response.get(field_name, _MISSING)


# Status

def validate_status_code(status_code: int, expected_code: int) -> None:
    if status_code != expected_code:
        _fail("Unexpected status code", expected_code, status_code)


def validate_status_code_in(status_code: int, expected_codes: Iterable[int]) -> None:
    expected = list(expected_codes)
    if status_code not in expected:
        _fail("Status code not allowed", expected, status_code)


# Shape

def validate_response_fields(response: Mapping[str, Any], required_fields: Iterable[str]) -> None:
    """Every required field is present and not null."""
    for field in required_fields:
        value = _field(response, field)
        if value is _MISSING:
            _fail("Missing required field", field, sorted(response.keys()))
        if value is None:
            _fail(f"Field '{field}' is null", "non-null value", value)


def validate_array_response(response: Any, min_length: int = 0) -> None:
    if not isinstance(response, list):
        _fail("Response is not an array", "array", json_type(response))
    if len(response) < min_length:
        _fail("Array is too short", f">= {min_length} items", len(response))


def validate_not_null(value: Any, field_name: str = "value") -> None:
    if value is None:
        _fail(f"'{field_name}' is null", "non-null value", value)


def validate_response_schema(response: Mapping[str, Any], schema: Mapping[str, str]) -> None:
    """Each schema key is present with the named JSON type."""
    for key, expected_type in schema.items():
        value = _field(response, key)
        if value is _MISSING:
            _fail("Missing schema field", key, sorted(response.keys()))
        if json_type(value) != expected_type:
            _fail(f"Field '{key}' has wrong type", expected_type, json_type(value))


def validate_nested_field(response: Any, path: str) -> None:
    """Dotted path such as 'address.geo.lat' resolves to a present field."""
    current = response
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            _fail(f"Nested field '{path}' not found", part, current)
        current = current[part]


def validate_array_items_have_fields(array: Sequence[Mapping[str, Any]], required_fields: Iterable[str]) -> None:
    fields = list(required_fields)
    for index, item in enumerate(array):
        for field in fields:
            if not isinstance(item, Mapping) or field not in item:
                _fail(f"Item {index} is missing a field", field, item)


def validate_array_length(array: Sequence[Any], expected_length: int) -> None:
    if len(array) != expected_length:
        _fail("Unexpected array length", expected_length, len(array))


def validate_array_min_length(array: Sequence[Any], min_length: int) -> None:
    if len(array) < min_length:
        _fail("Array is too short", f">= {min_length}", len(array))


def validate_array_max_length(array: Sequence[Any], max_length: int) -> None:
    if len(array) > max_length:
        _fail("Array is too long", f"<= {max_length}", len(array))


def validate_empty_response(response: Any) -> None:
    """Objects and arrays must be empty; scalars pass."""
    if isinstance(response, (Mapping, list)) and len(response) != 0:
        _fail("Response is not empty", "empty", response)


# Value and type

def validate_string_field(value: Any, min_length: int = 0) -> None:
    if not isinstance(value, str):
        _fail("Not a string", "string", json_type(value))
    if len(value) < min_length:
        _fail("String is too short", f">= {min_length} chars", len(value))


def validate_number_field(value: Any, min_value: float = 0) -> None:
    if json_type(value) != "number":
        _fail("Not a number", "number", json_type(value))
    if not value >= min_value:
        _fail("Number below minimum", f">= {min_value}", value)


def validate_boolean_field(value: Any) -> None:
    if not isinstance(value, bool):
        _fail("Not a boolean", "boolean", json_type(value))


def validate_field_type(response: Mapping[str, Any], field_name: str, expected_type: str) -> None:
    value = _field(response, field_name)
    actual = "undefined" if value is _MISSING else json_type(value)
    if actual != expected_type:
        _fail(f"Field '{field_name}' has wrong type", expected_type, actual)


def validate_field_value(response: Mapping[str, Any], field_name: str, expected_value: Any) -> None:
    value = _field(response, field_name)
    if value is _MISSING or not json_equal(value, expected_value):
        _fail(f"Field '{field_name}' mismatch", expected_value, None if value is _MISSING else value)


def validate_field_value_in(response: Mapping[str, Any], field_name: str, expected_values: Iterable[Any]) -> None:
    allowed = list(expected_values)
    value = _field(response, field_name)
    if value is _MISSING or not _json_in(value, allowed):
        _fail(f"Field '{field_name}' not in allowed values", allowed, None if value is _MISSING else value)


def validate_field_not_null(response: Mapping[str, Any], field_name: str) -> None:
    if _field(response, field_name) is None:
        _fail(f"Field '{field_name}' is null", "non-null value", None)


def validate_field_present(response: Mapping[str, Any], field_name: str) -> None:
    if _field(response, field_name) is _MISSING:
        _fail("Field is absent", field_name, sorted(response.keys()))


def validate_response_contains(response: Any, value: Any, field_name: Optional[str] = None) -> None:
    """Field equals value when a field is named, else the array contains value."""
    if field_name is not None:
        validate_field_value(response, field_name, value)
    elif isinstance(response, list):
        if not _json_in(value, response):
            _fail("Array does not contain value", value, response)


def validate_array_contains_field_value(array: Sequence[Mapping[str, Any]], field_name: str, expected_value: Any) -> None:
    found = [item.get(field_name) if isinstance(item, Mapping) else item for item in array]
    if not any(isinstance(item, Mapping) and field_name in item and json_equal(item[field_name], expected_value)
               for item in array):
        _fail(f"No item has '{field_name}'", expected_value, found)


def validate_field_pattern(value: str, pattern: Union[str, Pattern[str]]) -> None:
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    if not isinstance(value, str) or not regex.search(value):
        _fail("Value does not match pattern", regex.pattern, value)


def validate_email_format(email: str) -> None:
    validate_field_pattern(email, EMAIL_PATTERN)


def validate_uuid_format(uuid: str) -> None:
    validate_field_pattern(uuid, UUID_PATTERN)


def validate_string_length(value: str, min_length: int, max_length: Optional[int] = None) -> None:
    if not isinstance(value, str):
        _fail("Not a string", "string", json_type(value))
    if len(value) < min_length:
        _fail("String is too short", f">= {min_length}", len(value))
    if max_length is not None and len(value) > max_length:
        _fail("String is too long", f"<= {max_length}", len(value))


def validate_numeric_range(value: float, min_value: float, max_value: float) -> None:
    if json_type(value) != "number":
        _fail("Not a number", "number", json_type(value))
    if not min_value <= value <= max_value:
        _fail("Number out of range", f"[{min_value}, {max_value}]", value)


# Cross-cutting

def validate_content_type(headers: Mapping[str, str], expected_type: str = "application/json") -> None:
    content_type = next((v for k, v in headers.items() if k.lower() == "content-type"), None)
    if content_type is None or expected_type not in content_type:
        _fail("Unexpected content type", expected_type, content_type)


def validate_response_time(response_time: Union[float, timedelta], max_time: float = 5000) -> None:
    """Response time (milliseconds, or a timedelta) must be under max_time ms."""
    if isinstance(response_time, timedelta):
        response_time = response_time.total_seconds() * 1000
    if response_time >= max_time:
        _fail("Response too slow", f"< {max_time} ms", response_time)


def validate_object_equality(actual: Any, expected: Any) -> None:
    if not json_equal(actual, expected):
        _fail("Objects differ", expected, actual)


def validate_json_serializable(response: Any) -> None:
    try:
        json.dumps(response)
    except (TypeError, ValueError) as e:
        raise AssertionError(f"Value is not JSON serializable: {e}") from e
