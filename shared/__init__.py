"""
Blog Seed - Shared module.

This module contains shared utilities and configuration
used across the application.
"""

from shared.config import Settings, get_settings
from shared.logging_config import configure_logging
from shared.errors import (
    ErrorCategory,
    APIErrorResponse,
    ErrorLogger,
    MediaUploadError,
    SeedDataError,
    SeedError,
    get_error_logger,
    map_status_to_category,
)

__all__ = [
    # Core utilities
    "Settings",
    "get_settings",
    "configure_logging",
    # Error handling
    "ErrorCategory",
    "APIErrorResponse",
    "ErrorLogger",
    "get_error_logger",
    "map_status_to_category",
    "SeedError",
    "SeedDataError",
    "MediaUploadError",
]
