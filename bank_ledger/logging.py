"""Structured logging configuration for bank-ledger.

Ledger events carry their structured fields (account number, operation,
amount, balance) under ``extra={"extra": {...}}``; build that mapping with
:func:`ledger_fields`. Both formatters render those fields, so the same
call reads well on a terminal and parses cleanly as JSON.
"""

import logging
import sys
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for bank-ledger.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "json" for one JSON object per line, anything else for
        human-readable lines with ``key=value`` ledger fields.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter: logging.Formatter
    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = LedgerFormatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("bank_ledger").setLevel(log_level)

    # Faker logs locale loading at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def ledger_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` argument for a ledger log call.

    Examples
    --------
    >>> logger.info("Deposit posted", extra=ledger_fields(account_number="ACC1001"))
    """
    return {"extra": fields}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ledger fields attached to ``record``, JSON-ready."""
    from bank_ledger.sinks.serialization import serialize_value

    fields = getattr(record, "extra", None)
    if not isinstance(fields, dict):
        return {}
    return {key: serialize_value(value) for key, value in fields.items()}


class LedgerFormatter(logging.Formatter):
    """Plain-text formatter that appends ledger fields as ``key=value``."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{line} [{pairs}]"


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON, with ledger fields at the top level."""
        import json
        from datetime import datetime, timezone

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(record_fields(record))

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
