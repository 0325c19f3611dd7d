"""MikroFormat: convert and format between strings, numbers, dates, currencies and casings."""

from __future__ import annotations

from mikroformat.core.exceptions import ConversionError, MikroFormatError, UnsupportedDateStyleError
from mikroformat.core.types import DateStyle
from mikroformat.formatter import MikroFormat
from mikroformat.models.currency import FormatCurrencyInput

__all__ = [
    "ConversionError",
    "DateStyle",
    "FormatCurrencyInput",
    "MikroFormat",
    "MikroFormatError",
    "UnsupportedDateStyleError",
]
