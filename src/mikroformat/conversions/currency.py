"""Locale-aware currency formatting backed by Babel's CLDR data.

The output always uses the reference currency (EUR by default) no matter
which currency the request names. Callers rely on this, so it is preserved.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from babel import Locale, UnknownLocaleError
from babel.numbers import parse_pattern
from pydantic import ValidationError

from mikroformat.conversions.numeric import DEFAULT_PRECISION, coerce_decimal
from mikroformat.core.exceptions import ConversionError
from mikroformat.models.currency import FormatCurrencyInput

REFERENCE_CURRENCY = "EUR"

# Babel emits these between digit groups and around the symbol for many locales
_NON_BREAKING_SPACES = str.maketrans({"\u00a0": " ", "\u202f": " "})


def round_significant(number: Decimal, digits: int) -> Decimal:
    """Keep at most ``digits`` significant digits, halves away from zero."""
    if number.is_zero():
        return Decimal(0)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 2)
        quantum = Decimal(1).scaleb(number.adjusted() - digits + 1)
        return number.quantize(quantum, rounding=ROUND_HALF_UP)


def _fraction_digits(number: Decimal) -> int:
    exponent = number.normalize().as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def _coerce_request(request: FormatCurrencyInput | Mapping[str, Any]) -> FormatCurrencyInput:
    if isinstance(request, FormatCurrencyInput):
        return request
    if not isinstance(request, Mapping):
        raise ConversionError(request, "a currency")
    try:
        return FormatCurrencyInput.model_validate(dict(request))
    except ValidationError as exc:
        raise ConversionError(request.get("value"), "a currency", str(exc)) from exc


def _load_locale(tag: str) -> Locale:
    try:
        return Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError) as exc:
        raise ConversionError(tag, "a currency", f'No formatting data for locale "{tag}"!') from exc


def to_currency(
    request: FormatCurrencyInput | Mapping[str, Any],
    default_precision: int = DEFAULT_PRECISION,
    reference_currency: str = REFERENCE_CURRENCY,
) -> str:
    """Format a value as a currency string for the request's locale.

    >>> to_currency({"value": 24837.731, "precision": 8, "locale": "sv-SE", "currency": "EUR"})
    '24 837,731 €'
    """
    request = _coerce_request(request)
    number = coerce_decimal(request.value, "a currency")

    digits = request.precision if request.precision is not None else max(default_precision, 1)
    rounded = round_significant(number, digits)

    locale = _load_locale(request.locale)
    pattern = parse_pattern(locale.currency_formats["standard"].pattern)
    pattern.frac_prec = (0, _fraction_digits(rounded))
    text = pattern.apply(rounded, locale, currency=reference_currency, currency_digits=False)
    return text.translate(_NON_BREAKING_SPACES)
