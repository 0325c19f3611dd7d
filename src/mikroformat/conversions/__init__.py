"""Pure conversion functions behind the MikroFormat facade."""

from __future__ import annotations

from mikroformat.conversions.casing import to_camel_case, to_slug, to_snake_case, to_title_case
from mikroformat.conversions.currency import to_currency
from mikroformat.conversions.dates import to_date
from mikroformat.conversions.numeric import to_boolean, to_decimal, to_integer, to_percent
from mikroformat.conversions.text import stringify, to_json

__all__ = [
    "stringify",
    "to_boolean",
    "to_camel_case",
    "to_currency",
    "to_date",
    "to_decimal",
    "to_integer",
    "to_json",
    "to_percent",
    "to_slug",
    "to_snake_case",
    "to_title_case",
]
