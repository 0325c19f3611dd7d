"""Generic string and JSON conversions."""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from mikroformat.conversions.numeric import format_number
from mikroformat.core.types import JsonValue

logger = logging.getLogger(__name__)

# Integral floats at or above this print in exponent form, so stay floats
_MAX_POSITIONAL = 1e21


def _json_ready(value: Any) -> Any:
    """Map floats inside a structure to what JSON.stringify would emit."""
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer() and abs(value) < _MAX_POSITIONAL:
            return int(value)
        return value
    if isinstance(value, dict):
        return {k: _json_ready(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_ready(v) for v in value]
    return value


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def stringify(value: Any) -> str:
    """Format a number, string or plain mapping as a string.

    None becomes the empty string and dicts become compact JSON text.

    >>> stringify({"abc": 123, "foo": {"bar": "qwerty"}})
    '{"abc":123,"foo":{"bar":"qwerty"}}'
    """
    if value is None:
        return ""
    if type(value) is dict:
        return json.dumps(
            _json_ready(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=str
        )
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def to_json(value: str) -> JsonValue | None:
    """Parse JSON text, returning None (and logging a warning) when it is not valid JSON."""
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError):
        logger.warning('Provided value "%s" is not convertible to a JSON representation!', value)
        return None
