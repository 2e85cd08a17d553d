#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Logging configuration shared by every module.

Usage:
    from config.logging_config import get_logger
    logger = get_logger(__name__)

    logger.info("Glossary table resolved", extra={"event": "table_chosen", "table": name})
"""

import logging
import sys
from typing import Optional

# Attributes present on every LogRecord; anything else came in through `extra=`
_RESERVED_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}

DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_configured = False


class StructuredFormatter(logging.Formatter):
    """Formatter that appends `extra=` fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not fields:
            return base
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
        return f"{base} | {pairs}"


def setup_logging(level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure the root logger once.

    Args:
        level: Log level name (defaults to settings.log_level)
        force: Reconfigure even if already done
    """
    global _configured
    if _configured and not force:
        return

    if level is None:
        from config.settings import settings
        level = settings.log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(DEFAULT_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
