"""Centralized logging configuration."""

import logging
import sys
from datetime import datetime
from typing import Any, Protocol

from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d:%(funcName)s] - %(message)s"


class DebugLogger(Protocol):
    """Leveled logger accepted by ``RestClient.with_debug``.

    ``logging.Logger`` satisfies it as-is.
    """

    def debug(self, msg: str, *args: Any) -> None: ...

    def info(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond timestamps, so request and response lines
    of one REST call can be told apart.

    Example output of a debug-enabled client::

        client = RestClient().with_debug(logger)
        await client.get_public("/v5/market/time")

        2024-01-15 14:23:45.123456 - bybitapi - DEBUG - [transport.py:48:execute] - Request url: https://api.bybit.com/v5/market/time
        2024-01-15 14:23:45.187902 - bybitapi - DEBUG - [transport.py:70:execute] - Response: status=200 headers={...}
    """

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        s = ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S")
        return f"{s}.{int(record.created % 1 * 1_000_000):06d}"


def setup_logger(name: str = "bybitapi", level: str | None = None) -> logging.Logger:
    """
    Set up and return the package logger.

    Args:
        name: Logger name; "bybitapi.<module>" names share the package handler
        level: Level name overriding the LOG_LEVEL env var

    Returns:
        logging.Logger, usable directly as a RestClient debug logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers and not name.startswith("bybitapi."):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(MicrosecondFormatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO))

    return logger


logger = setup_logger()
