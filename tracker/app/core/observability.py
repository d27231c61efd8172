"""
Logging setup for the Parcel Tracker.

Store operations log through the "tracker" logger with structured
context passed via ``extra``; the formatter renders it as key=value pairs.
"""

import logging
from typing import Optional

from tracker.app.core.config import settings

logger = logging.getLogger("tracker")

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value for key, value in vars(record).items()
            if key not in _RESERVED
        }
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
            line = f"{line} {pairs}"
        return line


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a structured stream handler to the tracker logger.
    
    Safe to call more than once; the handler is installed only once.
    """
    logger.setLevel((level or settings.log_level).upper())
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter(settings.log_format))
        logger.addHandler(handler)
    return logger
