"""
Structured logging utilities for the HIBP lookup client.

The library only emits records through `get_logger(__name__)`; it never
installs handlers on import. Host applications (or tests) call
`configure_logging` to get a human-readable console formatter or a JSON
formatter for structured logs.

Usage:
    from hibp_client.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_logs=True)
    log = get_logger(__name__)
    log.warning("rate limited", extra={"retry_after": 2.0})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "hibp_client"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "extra"}

_REDACTED_HEADERS = frozenset({"hibp-api-key"})


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key not in _STANDARD_ATTRS:
            payload[key] = value
    if hasattr(record, "extra") and isinstance(record.extra, dict):
        payload.update(record.extra)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of `headers` safe to log (credentials masked)."""
    return {
        name: ("***" if name.lower() in _REDACTED_HEADERS and value else value)
        for name, value in headers.items()
    }


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    force: bool = True,
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    force : bool
        Whether to replace existing handlers. With False, an already
        configured root logger is left untouched.
    """
    if not force and logging.getLogger().handlers:
        return

    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the package logger.
    """
    return logging.getLogger(name or PACKAGE_LOGGER)


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


__all__ = ["configure_logging", "get_logger", "redact_headers", "JsonFormatter"]
