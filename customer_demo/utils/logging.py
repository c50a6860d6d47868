"""
Logging setup shared by the customer demo CLI, data service and export script.

Records go to stderr so that command output on stdout (for example
`customer-demo list --json`) stays machine-readable. Console output is a single
pipe-separated line per record; with `json_logs=True` every record becomes one
JSON object carrying the fields passed through `extra=`, such as `customer_id`
on saves and deletes.

Usage:
    from customer_demo.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_logs=True)
    log = get_logger(__name__)
    log.debug("saved customer", extra={"customer_id": 7})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes present on every LogRecord; anything else came from `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _render_json(record: logging.LogRecord) -> str:
    """Serialize a record and its `extra=` fields to one JSON line."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key, value in vars(record).items():
        if key not in _RESERVED_ATTRS and key not in payload and key != "extra":
            payload[key] = value
    # Older call sites pass a nested dict as `extra={"extra": {...}}`.
    nested = getattr(record, "extra", None)
    if isinstance(nested, dict):
        payload.update(nested)
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with `extra=` fields promoted to top level."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _render_json(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    force: bool = True,
) -> None:
    """
    Install a single stderr handler on the root logger.

    Parameters
    ----------
    level : str
        Level name, case-insensitive; "DEBUG" shows per-customer save/delete
        records, "INFO" only the demo seeding summary.
    json_logs : bool
        Use `JsonFormatter` instead of the console line format.
    force : bool
        When False and the root logger already has handlers (for example set up
        by a host application), leave the existing configuration untouched.
    """
    root = logging.getLogger()
    if not force and root.handlers:
        return
    level_name = level.upper()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {"format": CONSOLE_FORMAT, "datefmt": CONSOLE_DATEFMT},
                "json": {"()": JsonFormatter},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "json" if json_logs else "console",
                    "level": level_name,
                }
            },
            "root": {"handlers": ["stderr"], "level": level_name},
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the root logger when `name` is None."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
