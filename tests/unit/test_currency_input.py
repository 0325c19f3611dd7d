"""Tests for the FormatCurrencyInput model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mikroformat.models.currency import FormatCurrencyInput


def test_precision_is_optional():
    request = FormatCurrencyInput(value=1, locale="sv-SE", currency="EUR")
    assert request.precision is None


def test_currency_code_is_normalized():
    request = FormatCurrencyInput(value=1, locale="sv-SE", currency="sek")
    assert request.currency == "SEK"


def test_value_is_not_coerced():
    request = FormatCurrencyInput(value={}, locale="sv-SE", currency="EUR")
    assert request.value == {}


@pytest.mark.parametrize(
    "overrides",
    [
        {"locale": "sv_SE"},
        {"currency": "XYZ"},
        {"precision": 0},
        {"precision": 22},
    ],
)
def test_rejects_invalid_fields(overrides):
    fields = {"value": 1, "locale": "sv-SE", "currency": "EUR", **overrides}
    with pytest.raises(ValidationError):
        FormatCurrencyInput(**fields)
