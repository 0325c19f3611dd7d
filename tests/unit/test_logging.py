"""Tests for package logging setup."""

from __future__ import annotations

import logging

from mikroformat.core.logging import LOG_FORMAT, setup_logging


def test_setup_logging_is_idempotent():
    logger = setup_logging("info")
    try:
        setup_logging("debug")
        assert logger.name == "mikroformat"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
