"""Structured JSON logging configuration."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from shared.config import get_settings

# Fields copied from `extra` into the JSON payload when present
EXTRA_FIELDS = (
    "content_type",
    "document_id",
    "file_name",
    "log_ref",
    "error_category",
    "error_type",
    "error_context",
)


def truncate_message(message: str, max_length: int = 200) -> str:
    """
    Truncate message content for logs with length indicator.

    Args:
        message: Full message text
        max_length: Maximum characters to show (default: 200)

    Returns:
        Truncated message with total length indicator
    """
    if not message:
        return ""
    if len(message) <= max_length:
        return message
    return f"{message[:max_length]}... (truncated, total: {len(message)} chars)"


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs logs as JSON with consistent fields:
    - timestamp (ISO 8601)
    - level (INFO, ERROR, etc.)
    - logger (module name)
    - message
    - content_type / document_id / file_name / log_ref (if available in extra)
    - error_category / error_type / error_context (set by ErrorLogger)
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                value = getattr(record, field)
                log_data[field] = value if isinstance(value, dict) else str(value)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def configure_logging() -> None:
    """
    Configure application logging with JSON formatter.

    Reads LOG_LEVEL from settings (default: INFO).
    Outputs to stderr (captured by Docker logs).
    """
    settings = get_settings()

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # SQL echo is noisy during seeding
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    root_logger.info(
        f"Logging configured: level={settings.LOG_LEVEL}, format=JSON"
    )
