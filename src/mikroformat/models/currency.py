"""FormatCurrencyInput — the structured request accepted by to_currency."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from mikroformat.core.reference import SUPPORTED_CURRENCIES, SUPPORTED_LOCALES


class FormatCurrencyInput(BaseModel):
    """Value plus the locale, currency and significant-digit precision to render it with."""

    value: Any  # Coerced by the conversion, not by the model
    locale: str
    currency: str
    precision: Optional[int] = Field(default=None, ge=1, le=21)

    model_config = {"frozen": True}

    @field_validator("locale")
    @classmethod
    def _known_locale(cls, v: str) -> str:
        if v not in SUPPORTED_LOCALES:
            raise ValueError(f"unsupported locale {v!r}")
        return v

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, v: str) -> str:
        code = v.upper()
        if code not in SUPPORTED_CURRENCIES:
            raise ValueError(f"unsupported currency {v!r}")
        return code
