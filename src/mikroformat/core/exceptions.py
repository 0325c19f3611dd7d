"""MikroFormat exception hierarchy."""

from __future__ import annotations

from typing import Any


class MikroFormatError(Exception):
    """Base exception for all MikroFormat errors."""


class ConversionError(MikroFormatError):
    """A value is incompatible with the requested conversion."""

    def __init__(self, value: Any, target: str, message: str | None = None) -> None:
        self.value = value
        self.target = target
        super().__init__(message or f'Unable to convert "{value}" to {target}!')


class UnsupportedDateStyleError(ConversionError):
    """No date function exists for the requested style."""

    def __init__(self, style: Any) -> None:
        self.style = style
        super().__init__(style, "a date", f'Missing date function for style "{style}"!')
