"""Date conversions between calendar dates, ISO-8601, epoch milliseconds and RFC 7231.

Every input is first resolved to an aware UTC datetime, then rendered in the
requested style. Calendar dates and date-times without an offset are read as UTC.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Any

from mikroformat.core.exceptions import ConversionError, UnsupportedDateStyleError
from mikroformat.core.types import DateInput, DateStyle

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _parse_text(value: str) -> datetime:
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError) as exc:
        raise ConversionError(value, "a date") from exc


def to_instant(value: DateInput) -> datetime:
    """Resolve a date string, epoch-millisecond number, date or datetime to an aware UTC datetime."""
    if isinstance(value, bool):
        raise ConversionError(value, "a date")
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        try:
            return EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError) as exc:
            raise ConversionError(value, "a date") from exc
    if isinstance(value, str):
        return _as_utc(_parse_text(value))
    raise ConversionError(value, "a date")


def to_calendar_date(value: DateInput) -> str:
    """``2024-03-13`` (the UTC calendar date)."""
    return to_instant(value).date().isoformat()


def to_iso(value: DateInput) -> str:
    """``2024-03-13T13:02:40.000Z``."""
    return to_instant(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_epoch_millis(value: DateInput) -> int:
    """Milliseconds since the Unix epoch, e.g. ``1710334960000``."""
    return (to_instant(value) - EPOCH) // _ONE_MS


def to_http_date(value: DateInput) -> str:
    """``Wed, 13 Mar 2024 13:02:40 GMT`` (RFC 7231 IMF-fixdate)."""
    return format_datetime(to_instant(value).replace(microsecond=0), usegmt=True)


def to_date(value: DateInput, style: DateStyle | str) -> str | int:
    """Convert one type of date into another.

    Styles:
    - ``date``: ``YYYY-MM-DD``, e.g. ``2024-02-29``
    - ``iso``: ISO-8601, e.g. ``2024-03-13T13:02:40.000Z``
    - ``unix``: epoch milliseconds, e.g. ``1710334960000``
    - ``utc``: RFC 7231, e.g. ``Wed, 13 Mar 2024 13:02:40 GMT``

    Raises UnsupportedDateStyleError for any other style.
    """
    try:
        resolved: Any = DateStyle(style)
    except ValueError:
        resolved = style

    match resolved:
        case DateStyle.DATE:
            return to_calendar_date(value)
        case DateStyle.ISO:
            return to_iso(value)
        case DateStyle.UNIX:
            return to_epoch_millis(value)
        case DateStyle.UTC:
            return to_http_date(value)
        case _:
            raise UnsupportedDateStyleError(style)
