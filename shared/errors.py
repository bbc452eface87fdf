"""
Unified Error Handling System for the seeding routine and the read API.

This module provides error categories, the seed exception hierarchy,
a Pydantic response model for API errors, and centralized error logging
with structured context.

Usage:
    from shared.errors import ErrorCategory, get_error_logger

    log_ref = get_error_logger().log_error(
        error=exc,
        category=ErrorCategory.DATABASE_ERROR,
        context={"content_type": "tag"},
    )
"""

import logging
import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Categories of errors for proper handling and logging.

    CLIENT ERRORS (returned by the read API):
    - VALIDATION_ERROR: Invalid input or malformed seed document
    - NOT_FOUND_ERROR: Requested record not found
    - PERMISSION_ERROR: Public role lacks the required action

    SYSTEM ERRORS (logged internally):
    - DATABASE_ERROR: PostgreSQL/SQLAlchemy errors
    - MEDIA_ERROR: Local file or upload failures
    - CONFIGURATION_ERROR: Missing or invalid configuration
    - UNEXPECTED_ERROR: Unknown/unhandled exceptions
    """
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND_ERROR = "not_found_error"
    PERMISSION_ERROR = "permission_error"

    DATABASE_ERROR = "database_error"
    MEDIA_ERROR = "media_error"
    CONFIGURATION_ERROR = "configuration_error"
    UNEXPECTED_ERROR = "unexpected_error"


class SeedError(Exception):
    """Base class for seed import errors."""


class SeedDataError(SeedError):
    """The seed document is missing or does not match the expected shape."""


class MediaUploadError(SeedError):
    """A media file could not be stored."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(f"{file_name}: {message}")


class APIErrorResponse(BaseModel):
    """Standardized error response format for API endpoints."""
    success: bool = Field(default=False, description="Always False for errors")
    error_category: ErrorCategory = Field(description="Error category for classification")
    error_code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable message")
    log_ref: str | None = Field(default=None, description="Reference ID for log correlation")


def map_status_to_category(status_code: int) -> ErrorCategory:
    """Map an HTTP status code to its error category."""
    if status_code == 403:
        return ErrorCategory.PERMISSION_ERROR
    if status_code == 404:
        return ErrorCategory.NOT_FOUND_ERROR
    if 400 <= status_code < 500:
        return ErrorCategory.VALIDATION_ERROR
    return ErrorCategory.UNEXPECTED_ERROR


class ErrorLogger:
    """Centralized error logging with structured context."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ErrorLogger")

    def _generate_log_ref(self) -> str:
        """Generate unique reference ID for error correlation."""
        return f"err_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"

    def log_error(
        self,
        error: Exception,
        category: ErrorCategory,
        *,
        context: dict[str, Any] | None = None,
        exc_info: bool = True,
    ) -> str:
        """Log error with full structured context.

        Args:
            error: The exception that occurred
            category: Error category for classification
            context: Additional context data (content type, file name...)
            exc_info: Whether to include stack trace

        Returns:
            log_ref: Unique reference ID for this error instance
        """
        log_ref = self._generate_log_ref()

        extra = {
            "log_ref": log_ref,
            "error_category": category.value,
            "error_type": type(error).__name__,
            "error_context": context or {},
        }
        for key in ("content_type", "file_name", "document_id"):
            if context and key in context:
                extra[key] = context[key]

        if category in [
            ErrorCategory.DATABASE_ERROR,
            ErrorCategory.UNEXPECTED_ERROR,
        ]:
            self.logger.error(
                f"[{log_ref}] {category.value}: {error}",
                extra=extra,
                exc_info=exc_info,
            )
        else:
            self.logger.warning(
                f"[{log_ref}] {category.value}: {error}",
                extra=extra,
                exc_info=exc_info,
            )

        return log_ref


# Global error logger instance
_error_logger = ErrorLogger()


def get_error_logger() -> ErrorLogger:
    """Get the global error logger instance."""
    return _error_logger
