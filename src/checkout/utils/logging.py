"""Logging configuration for the Checkout service.

Console output plus a rotating error log that collects reconciliation alerts
(an approved charge with no recorded order). Production and staging render
JSON; other environments use the structlog console renderer.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

ERROR_LOG = "checkout_error.log"

_LEVELS = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def _environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", _LEVELS.get(_environment(), "INFO"))


def configure_logging(log_dir: Path = Path("logs")) -> None:
    """Route stdlib logging to the console and the error log, then configure structlog."""
    level = get_log_level()
    log_dir.mkdir(exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    errors = logging.handlers.RotatingFileHandler(
        filename=log_dir / ERROR_LOG,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    errors.setLevel(logging.ERROR)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [console, errors]
    logging.getLogger("protean").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if _environment() in ("production", "staging")
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
