"""
Blog Seed - Media Resolver.

Turns a seed filename into a media library record: reuses an existing
file with the same name, or uploads the local file from the seed
uploads directory.
"""

import logging
import mimetypes
import re
from pathlib import Path

from sqlalchemy import select

from api.services.upload_service import FileData, UploadService
from database.connection import SessionFactory, get_async_session
from database.models import MediaFile
from shared.config import get_settings
from shared.errors import ErrorCategory, MediaUploadError, get_error_logger

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def strip_extension(file_name: str) -> str:
    """Drop the last extension: 'photo.min.jpg' -> 'photo.min'."""
    return _EXTENSION_RE.sub("", file_name)


def guess_mime_type(file_name: str) -> str:
    """MIME type from the file extension, octet-stream when unknown."""
    mime_type, _ = mimetypes.guess_type(file_name)
    if mime_type is None:
        logger.debug(f"Unknown MIME type for {file_name}, using {DEFAULT_MIME_TYPE}")
        return DEFAULT_MIME_TYPE
    return mime_type


class MediaResolver:
    """Resolves seed filenames to MediaFile records."""

    def __init__(
        self,
        uploads_dir: str | Path | None = None,
        upload_service: UploadService | None = None,
        session_factory: SessionFactory = get_async_session,
    ):
        self.uploads_dir = Path(uploads_dir or get_settings().SEED_UPLOADS_DIR)
        self.session_factory = session_factory
        self.upload_service = upload_service or UploadService(session_factory=session_factory)

    def get_file_data(self, file_name: str) -> FileData | None:
        """
        Describe a local seed file.

        Returns:
            FileData, or None when the file does not exist
        """
        file_path = self.uploads_dir / file_name

        if not file_path.is_file():
            logger.warning(f"File not found: {file_path}", extra={"file_name": file_name})
            return None

        return {
            "file_path": file_path,
            "original_filename": file_name,
            "size": file_path.stat().st_size,
            "mime_type": guess_mime_type(file_name),
        }

    async def find_existing(self, name: str) -> MediaFile | None:
        async with self.session_factory() as session:
            result = await session.execute(
                select(MediaFile).where(MediaFile.name == name).limit(1)
            )
            return result.scalar_one_or_none()

    async def upload_file(self, file: FileData, name: str) -> MediaFile | None:
        """Upload with alt text and caption derived from the name."""
        uploaded = await self.upload_service.upload(
            file,
            {
                "name": name,
                "alternative_text": f"An image uploaded to the media library called {name}",
                "caption": name,
            },
        )
        return uploaded[0] if uploaded else None

    async def resolve(self, file_name: str | None) -> MediaFile | None:
        """
        Find or upload the media file for a seed filename.

        Name equality (filename without extension) is the only dedup key.
        A missing local file or a failed upload yields None.

        Args:
            file_name: Filename under the seed uploads directory, or None

        Returns:
            The existing or newly uploaded MediaFile, or None
        """
        if not file_name:
            return None

        name = strip_extension(file_name)
        existing = await self.find_existing(name)
        if existing:
            logger.info(f"Reusing media file {name} ({existing.id})", extra={"file_name": file_name})
            return existing

        file_data = self.get_file_data(file_name)
        if file_data is None:
            return None

        try:
            return await self.upload_file(file_data, name)
        except MediaUploadError as e:
            get_error_logger().log_error(
                error=e,
                category=ErrorCategory.MEDIA_ERROR,
                context={"file_name": file_name},
            )
            return None
