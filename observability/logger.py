"""Structured logging setup using structlog.

The client only emits events. Module loggers are backed by stdlib loggers,
so until the embedding application configures logging the stdlib WARNING
threshold applies and request events stay silent. Applications opt in with
``setup_logging``, passing explicit values or a ``Settings`` instance carrying
``log_level`` / ``log_format``.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from config.settings import Settings

# Header values that must never reach a log line.
_REDACTED_HEADERS = frozenset({"api-key", "authorization"})


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        k: ("***" if k.lower() in _REDACTED_HEADERS else v)
        for k, v in headers.items()
    }


def setup_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    fmt: str | None = None,
) -> None:
    """Configure structlog. Explicit ``level``/``fmt`` override ``settings``."""
    level = level or (settings.log_level if settings else "INFO")
    fmt = fmt or (settings.log_format if settings else "json")

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(numeric_level)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(logging.getLogger(name))
