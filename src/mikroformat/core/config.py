"""Formatter configuration using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class FormatterSettings(BaseSettings):
    """Defaults applied by the MikroFormat facade."""

    model_config = {"env_prefix": "MIKROFORMAT_"}

    default_precision: int = Field(default=3, ge=0)
    # Output currency of to_currency, regardless of the requested code
    reference_currency: str = "EUR"
    log_level: str = "WARNING"
