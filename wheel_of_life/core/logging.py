"""Structured logging for the Wheel of Life service.

Context fields are rendered as key=value pairs after the message. Recipient
addresses are reduced to their domain and credentials are masked, whichever
call site supplied them.
"""

import logging
import sys
from typing import Any

# Context fields holding an address; only the domain is logged
ADDRESS_FIELDS = frozenset({"email", "recipient", "to"})

# Context fields that must never be logged in clear
SECRET_FIELDS = frozenset({"password", "api_key", "credential"})


def recipient_domain(address: str) -> str:
    """Return the domain part of an address, or "unknown" if it has none."""
    if "@" not in address:
        return "unknown"
    return address.rpartition("@")[2] or "unknown"


def _scrub(key: str, value: Any) -> Any:
    if key in SECRET_FIELDS:
        return "***"
    if key in ADDRESS_FIELDS:
        return recipient_domain(str(value))
    return value


class StructuredFormatter(logging.Formatter):
    """key=value formatter for service logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None) or {}
        log_data.update({key: _scrub(key, value) for key, value in context.items()})

        if record.exc_info:
            log_data["exc"] = self.formatException(record.exc_info).splitlines()[-1]

        return " ".join(f"{k}={v}" for k, v in log_data.items())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the structured handler attached.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        # DEBUG in dev, INFO elsewhere
        try:
            from wheel_of_life.core.config import get_settings

            dev = get_settings().WHEEL_ENV == "dev"
        except Exception:
            dev = False
        logger.setLevel(logging.DEBUG if dev else logging.INFO)

    return logger


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """
    Log a message with context fields (transport, recipient_domain, ...).

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        msg: Log message
        **context: Fields appended to the log line
    """
    logger.log(level, msg, extra={"context": context})
