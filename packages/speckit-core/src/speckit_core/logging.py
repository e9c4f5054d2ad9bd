from __future__ import annotations

import json
import logging
import sys

LOGGER_NAME = "speckit"

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_TEXT_DATEFMT = "%H:%M:%S"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": record.created,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)


def setup_logging(level: str | int = "WARNING", json_output: bool = False) -> logging.Logger:
    """Configure the ``speckit`` logger and return it.

    Repeated calls reuse the single stderr handler; the level and the
    output format always follow the latest call.  Unknown level names
    fall back to WARNING.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(sys.stderr))

    formatter = (
        JSONFormatter()
        if json_output
        else logging.Formatter(_TEXT_FORMAT, datefmt=_TEXT_DATEFMT)
    )
    for handler in logger.handlers:
        handler.setFormatter(formatter)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger under the speckit namespace."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
