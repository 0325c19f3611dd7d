"""Command-line access to the MikroFormat conversions.

Usage:
    mikroformat percent 24.29179797432987 --precision 3
    mikroformat currency 24837.731 --locale sv-SE --currency EUR --precision 8
    mikroformat date 1710334960000 --style utc
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable, Sequence
from typing import Any

from mikroformat.conversions.numeric import format_number
from mikroformat.core.config import FormatterSettings
from mikroformat.core.exceptions import ConversionError
from mikroformat.core.logging import setup_logging
from mikroformat.core.types import DateStyle
from mikroformat.formatter import MikroFormat


def _date_value(raw: str) -> str | int:
    """Bare integers on the command line are epoch milliseconds."""
    return int(raw) if raw.lstrip("-").isdigit() else raw


def _json_value(raw: str) -> Any:
    """Let ``string`` accept JSON objects, falling back to the raw text."""
    if raw.startswith("{"):
        try:
            return json.loads(raw)
        except ValueError:
            return raw
    return raw


def _operations(fmt: MikroFormat) -> dict[str, Callable[[argparse.Namespace], Any]]:
    return {
        "string": lambda a: fmt.stringify(_json_value(a.value)),
        "integer": lambda a: fmt.to_integer(a.value),
        "decimal": lambda a: fmt.to_decimal(a.value, a.precision),
        "boolean": lambda a: fmt.to_boolean(a.value),
        "percent": lambda a: fmt.to_percent(a.value, a.precision),
        "slug": lambda a: fmt.to_slug(a.value),
        "camel": lambda a: fmt.to_camel_case(a.value),
        "snake": lambda a: fmt.to_snake_case(a.value),
        "title": lambda a: fmt.to_title_case(a.value),
        "currency": lambda a: fmt.to_currency(
            {"value": a.value, "locale": a.locale, "currency": a.currency, "precision": a.precision}
        ),
        "json": lambda a: fmt.to_json(a.value),
        "date": lambda a: fmt.to_date(_date_value(a.value), a.style),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mikroformat", description="Convert and format values")
    parser.add_argument("--log-level", default=None, help="Logging level (default from MIKROFORMAT_LOG_LEVEL)")
    sub = parser.add_subparsers(dest="operation", required=True)

    for name in ("string", "integer", "boolean", "slug", "camel", "snake", "title", "json"):
        sub.add_parser(name).add_argument("value")

    for name in ("decimal", "percent"):
        p = sub.add_parser(name)
        p.add_argument("value")
        p.add_argument("--precision", type=int, default=None, help="Decimal places")

    p = sub.add_parser("currency")
    p.add_argument("value")
    p.add_argument("--locale", required=True, help="Locale tag (e.g. sv-SE)")
    p.add_argument("--currency", default="EUR", help="ISO 4217 code")
    p.add_argument("--precision", type=int, default=None, help="Significant digits")

    p = sub.add_parser("date")
    p.add_argument("value")
    p.add_argument("--style", required=True, choices=[s.value for s in DateStyle])
    return parser


def _render(result: Any) -> str:
    if isinstance(result, bool) or result is None or isinstance(result, (dict, list)):
        return json.dumps(result, separators=(",", ":"), ensure_ascii=False)
    if isinstance(result, float):
        return format_number(result)
    return str(result)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = FormatterSettings()
    setup_logging(args.log_level or settings.log_level)

    fmt = MikroFormat(settings)
    try:
        result = _operations(fmt)[args.operation](args)
    except ConversionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_render(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
