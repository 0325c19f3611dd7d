"""Tests for the MikroFormat facade."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from mikroformat import ConversionError, DateStyle, MikroFormat
from mikroformat.core.config import FormatterSettings


@pytest.fixture
def fmt():
    return MikroFormat()


def test_default_precision(fmt):
    assert fmt.default_precision == 3
    assert fmt.to_decimal(1.23456) == 1.235


def test_configured_precision():
    fmt = MikroFormat(FormatterSettings(default_precision=1))
    assert fmt.to_decimal(1.25) == 1.3
    assert fmt.to_percent(1.25) == "1.3%"
    assert fmt.to_decimal(1.25, 2) == 1.25


def test_configured_reference_currency():
    fmt = MikroFormat(FormatterSettings(reference_currency="USD"))
    result = fmt.to_currency({"value": 10, "locale": "en-US", "currency": "EUR"})
    assert result == "$10"


def test_operations(fmt):
    assert fmt.stringify(None) == ""
    assert fmt.to_integer("123.123") == 123
    assert fmt.to_boolean("false") is False
    assert fmt.to_percent(24.29179797432987) == "24.292%"
    assert fmt.to_slug("Hello World") == "hello-world"
    assert fmt.to_camel_case("hello world") == "helloWorld"
    assert fmt.to_snake_case("Hello World") == "hello_world"
    assert fmt.to_title_case("hello world") == "Hello World"
    assert fmt.to_json('{"abc":123}') == {"abc": 123}
    assert fmt.to_date(1710334960000, DateStyle.UTC) == "Wed, 13 Mar 2024 13:02:40 GMT"


def test_currency(fmt):
    request = {"value": 24837.731, "locale": "sv-SE", "currency": "EUR"}
    assert fmt.to_currency(request) == "24 800 €"
    assert fmt.to_currency({**request, "precision": 8}) == "24 837,731 €"


def test_errors(fmt):
    with pytest.raises(ConversionError):
        fmt.to_integer({})
    with pytest.raises(ConversionError):
        fmt.to_decimal({})
    with pytest.raises(ConversionError):
        fmt.to_currency({"value": {}, "precision": 8, "locale": "sv-SE", "currency": "EUR"})
    with pytest.raises(ConversionError):
        fmt.to_date("2024-03-13", "unsupported-style")


def test_json_failure_is_silent(fmt, caplog):
    with caplog.at_level(logging.WARNING, logger="mikroformat"):
        assert fmt.to_json("not json") is None
    assert caplog.records[0].levelname == "WARNING"


def test_safe_to_share_across_threads(fmt):
    values = [f"{i}.5" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(fmt.to_integer, values))
    assert results == [i + 1 for i in range(200)]
