"""
Structured logging configuration using structlog.

Service and provider modules log through the stdlib ``logging`` module;
their records are rendered by structlog alongside the HTTP middleware's
native structlog events. Output is JSON lines unless running at DEBUG,
where the console renderer is used instead.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings

# Chatty dependencies of the HTTP stack and the quotes provider
QUIET_LOGGERS = ("uvicorn.access", "httpcore", "httpx", "yfinance", "peewee")


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _resolve_level(log_level: Optional[str]) -> int:
    return getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)


def setup_logging(log_level: Optional[str] = None) -> None:
    """Route structlog and stdlib logging to a single stdout handler.

    Args:
        log_level: Override log level (default: from settings.log_level)
    """
    level = _resolve_level(log_level)
    shared = _shared_processors()

    if level == logging.DEBUG:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        shared.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
