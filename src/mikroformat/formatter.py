"""MikroFormat — the formatting facade.

Converts and formats between representations: JSON, dates, currencies and
numbers, and string casings.

    from mikroformat import MikroFormat

    mikroformat = MikroFormat()
    mikroformat.to_percent(24.29179797432987)  # "24.292%"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mikroformat.conversions import casing, currency, dates, numeric, text
from mikroformat.core.config import FormatterSettings
from mikroformat.core.types import DateInput, DateStyle, JsonValue, NumericInput
from mikroformat.models.currency import FormatCurrencyInput


class MikroFormat:
    """Stateless facade over the conversion functions.

    Holds only the settings it was built with; every method is a pure
    function of its arguments and safe to share across threads.
    """

    def __init__(self, settings: FormatterSettings | None = None) -> None:
        self._settings = settings or FormatterSettings()

    @property
    def default_precision(self) -> int:
        return self._settings.default_precision

    def _precision(self, precision: int | None) -> int:
        return self.default_precision if precision is None else precision

    def stringify(self, value: Any) -> str:
        """``123`` -> ``"123"``; ``None`` -> ``""``; dicts -> compact JSON."""
        return text.stringify(value)

    def to_integer(self, value: NumericInput) -> int:
        """``123.123`` -> ``123``."""
        return numeric.to_integer(value)

    def to_decimal(self, value: NumericInput, precision: int | None = None) -> float:
        """``(123.129631586528, 8)`` -> ``123.12963159``."""
        return numeric.to_decimal(value, self._precision(precision))

    def to_boolean(self, value: Any) -> bool:
        return numeric.to_boolean(value)

    def to_percent(self, value: NumericInput, precision: int | None = None) -> str:
        """``(24.29179797432987, 3)`` -> ``"24.292%"``."""
        return numeric.to_percent(value, self._precision(precision))

    def to_slug(self, value: int | float | str) -> str:
        return casing.to_slug(value)

    def to_camel_case(self, value: str) -> str:
        return casing.to_camel_case(value)

    def to_snake_case(self, value: str) -> str:
        return casing.to_snake_case(value)

    def to_title_case(self, value: str) -> str:
        return casing.to_title_case(value)

    def to_currency(self, request: FormatCurrencyInput | Mapping[str, Any]) -> str:
        """Format ``request.value`` for ``request.locale``.

        Always renders the configured reference currency; ``request.currency``
        is validated but not used for formatting.
        """
        return currency.to_currency(
            request,
            default_precision=self.default_precision,
            reference_currency=self._settings.reference_currency,
        )

    def to_json(self, value: str) -> JsonValue | None:
        """Parse JSON text; returns None and logs a warning when it cannot."""
        return text.to_json(value)

    def to_date(self, value: DateInput, style: DateStyle | str) -> str | int:
        return dates.to_date(value, style)
