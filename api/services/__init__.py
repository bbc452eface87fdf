"""
Blog Seed - API Services.

This module contains business logic services for the API.
"""

from api.services.upload_service import FileData, FileInfo, UploadService

__all__ = [
    "FileData",
    "FileInfo",
    "UploadService",
]
