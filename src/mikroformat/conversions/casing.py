"""Identifier casings: slug, camelCase, snake_case and Title Case."""

from __future__ import annotations

import re

from mikroformat.conversions.text import stringify

_SLUG_SEPARATORS = re.compile(r"[\s_]+")
_SLUG_INVALID = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")

_SNAKE_SEPARATORS = re.compile(r"[\s-]+")
_SNAKE_INVALID = re.compile(r"[^a-z0-9_]")
_UNDERSCORE_RUNS = re.compile(r"__+")

_CAMEL_TOKENS = re.compile(r"^\w|[A-Z]|\b\w|\s+")
_TITLE_WORD_START = re.compile(r"(^|\s)\S")


def to_slug(value: int | float | str) -> str:
    """``"Hello World"`` -> ``"hello-world"``.

    Leading and trailing hyphens are kept; only runs are collapsed.
    """
    text = stringify(value).lower()
    text = _SLUG_SEPARATORS.sub("-", text)
    text = _SLUG_INVALID.sub("", text)
    return _HYPHEN_RUNS.sub("-", text)


def _camel_token(match: re.Match[str]) -> str:
    token = match.group(0)
    if token.isspace():
        return ""
    return token.lower() if match.start() == 0 else token.upper()


def to_camel_case(value: str) -> str:
    """``"hello world"`` -> ``"helloWorld"``."""
    return _CAMEL_TOKENS.sub(_camel_token, stringify(value))


def to_snake_case(value: str) -> str:
    """``"Hello World"`` -> ``"hello_world"``."""
    text = stringify(value).lower()
    text = _SNAKE_SEPARATORS.sub("_", text)
    text = _SNAKE_INVALID.sub("", text)
    return _UNDERSCORE_RUNS.sub("_", text)


def to_title_case(value: str) -> str:
    """``"hello world"`` -> ``"Hello World"``."""
    text = stringify(value).lower()
    return _TITLE_WORD_START.sub(lambda m: m.group(0).upper(), text)
