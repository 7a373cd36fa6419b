"""
Request validation helpers.

Parsing of raw path/query values and translation of pydantic validation
errors into the single human-readable message returned to clients.
"""

import re
import uuid
from typing import Any, Iterable, Mapping, Optional

AT_LEAST_ONE_FIELD = "at_least_one_field"
AT_LEAST_ONE_FIELD_MESSAGE = "At least one field is required"

_INTEGER = re.compile(r"^[+-]?\d+$")

# Signed 64-bit range, the widest integer the database accepts
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

# pydantic error types that describe the body as a whole, not a field
_MALFORMED_BODY_TYPES = {"json_invalid", "json_type"}


def parse_query_param(value: Optional[str], default: int) -> int:
    """
    Parse an integer query parameter.

    Args:
        value: Raw query string value, None when absent
        default: Value used when the parameter is absent or empty

    Returns:
        Parsed integer

    Raises:
        ValueError: If the value is present but not a 64-bit integer
    """
    if value is None or value == "":
        return default
    if not _INTEGER.match(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def parse_uuid(value: str) -> uuid.UUID:
    """Parse a user id. Raises ValueError when it is not a UUID."""
    return uuid.UUID(value)


def is_malformed_body(errors: Iterable[Mapping[str, Any]]) -> bool:
    """
    Tell whether validation failed on the shape of the body itself.

    True for undecodable JSON, for a missing or non-object body and for a
    field holding a JSON value of the wrong type. A null field is not
    counted: it reads as an absent value. Errors raised by model-level
    validators also sit at the body root but are semantic, so they are not
    counted either.
    """
    for error in errors:
        kind = error.get("type", "")
        if kind in _MALFORMED_BODY_TYPES:
            return True
        loc = tuple(error.get("loc", ()))
        if loc == ("body",) and kind != AT_LEAST_ONE_FIELD:
            return True
        if kind.endswith("_type") and error.get("input") is not None:
            return True
    return False


def _field_name(error: Mapping[str, Any]) -> str:
    loc = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
    return loc[-1].capitalize() if loc else ""


def error_message(error: Mapping[str, Any]) -> str:
    """Build the message for a single pydantic error."""
    kind = error.get("type")
    if kind == AT_LEAST_ONE_FIELD:
        return AT_LEAST_ONE_FIELD_MESSAGE

    name = _field_name(error)
    ctx = error.get("ctx") or {}

    if kind == "missing" or error.get("input") in (None, ""):
        return f"Field {name} is required"
    if kind == "string_too_short":
        return f"Field {name} min length {ctx.get('min_length')}"
    if kind == "string_too_long":
        return f"Field {name} max length {ctx.get('max_length')}"
    if kind == "value_error" and "email" in str(error.get("msg", "")):
        return f"Field {name} must be a valid email"
    return f"Field {name} is invalid"


def validation_message(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Collapse validation errors into one message.

    Every error is evaluated but only the last one is reported.
    """
    message = "Invalid input"
    for error in errors:
        message = error_message(error)
    return message
