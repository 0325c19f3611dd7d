"""Numeric conversions: integers, decimals, percentages and booleans.

Numbers are rounded in decimal space with ROUND_HALF_UP (half away from zero),
so 2.675 rounds to 2.68 rather than the binary-float 2.67.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from mikroformat.core.exceptions import ConversionError
from mikroformat.core.types import NumericInput

DEFAULT_PRECISION = 3


def coerce_decimal(value: Any, target: str) -> Decimal:
    """Coerce a number or numeric string to a finite Decimal.

    Raises ConversionError for booleans, mappings, non-numeric strings and
    non-finite values.
    """
    if isinstance(value, bool):
        raise ConversionError(value, target)
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ConversionError(value, target) from exc
    else:
        raise ConversionError(value, target)

    if not number.is_finite():
        raise ConversionError(value, target)
    return number


def round_half_up(number: Decimal, places: int) -> Decimal:
    """Round to a fixed number of decimal places, halves away from zero."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_number(number: int | float | Decimal) -> str:
    """Render a number as text the way JavaScript's Number#toString does.

    Floats are positional between 1e-7 and 1e21 with no trailing '.0',
    and use a compact exponent ("1e-8", "1e+21") outside that range.
    """
    if not isinstance(number, float):
        return str(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"
    if 1e-7 <= abs(number) < 1e21:
        text = format(Decimal(repr(number)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    mantissa, _, exponent = repr(number).partition("e")
    return f"{mantissa}e{int(exponent):+d}"


def _resolve_precision(value: Any, precision: int | None) -> int:
    if precision is None:
        return DEFAULT_PRECISION
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise ConversionError(value, "a decimal number", f"Invalid precision {precision!r}!")
    return precision


def to_integer(value: NumericInput) -> int:
    """Round a number or numeric string to the nearest whole number.

    >>> to_integer(123.5)
    124
    """
    number = coerce_decimal(value, "an integer")
    return int(round_half_up(number, 0))


def to_decimal(value: NumericInput, precision: int | None = None) -> float:
    """Round a number or numeric string to ``precision`` decimal digits (default 3).

    The result is a float, so trailing zeros are not kept.

    >>> to_decimal(123.129631586528, 8)
    123.12963159
    """
    number = coerce_decimal(value, "a decimal number")
    return float(round_half_up(number, _resolve_precision(value, precision)))


def to_percent(value: NumericInput, precision: int | None = None) -> str:
    """Round like to_decimal and append a '%' sign, e.g. ``"24.292%"``."""
    return f"{format_number(to_decimal(value, precision))}%"


def to_boolean(value: Any) -> bool:
    """Map "true"/"false" literally; everything else by truthiness.

    Zero, NaN, the empty string and None are false. Any other value,
    including empty containers, is true.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, Decimal):
        return not (value.is_zero() or value.is_nan())
    return True
