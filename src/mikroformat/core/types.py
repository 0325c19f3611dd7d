"""Type aliases and enumerations used across MikroFormat."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

NumericInput = int | float | Decimal | str
DateInput = str | int | float | date | datetime
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class DateStyle(StrEnum):
    """Output styles understood by to_date."""

    DATE = "date"  # 2024-02-29
    ISO = "iso"  # 2024-03-13T13:02:40.000Z
    UNIX = "unix"  # 1710334960000 (milliseconds)
    UTC = "utc"  # Wed, 13 Mar 2024 13:02:40 GMT
