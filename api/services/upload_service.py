"""
Blog Seed - Media Upload Service.

Stores local files in the media library: copies the file under a
UUID-based name in MEDIA_UPLOAD_DIR and records its metadata.
"""

import logging
import shutil
import uuid
from pathlib import Path
from typing import TypedDict

from PIL import Image, UnidentifiedImageError

from database.connection import SessionFactory, get_async_session
from database.models import MediaFile
from shared.config import get_settings
from shared.errors import MediaUploadError

logger = logging.getLogger(__name__)

# Vector/unknown formats Pillow cannot measure
UNMEASURED_MIME_TYPES = {"image/svg+xml"}


class FileData(TypedDict):
    """A local file ready to be uploaded."""
    file_path: Path
    original_filename: str
    size: int
    mime_type: str


class FileInfo(TypedDict):
    """Descriptive fields stored with the uploaded file."""
    name: str
    alternative_text: str
    caption: str


def read_image_dimensions(file_path: Path, mime_type: str) -> tuple[int | None, int | None]:
    """
    Read width and height of a raster image.

    Returns:
        (width, height), or (None, None) for non-images and unreadable files
    """
    if not mime_type.startswith("image/") or mime_type in UNMEASURED_MIME_TYPES:
        return None, None

    try:
        with Image.open(file_path) as img:
            return img.size
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not read image dimensions for {file_path.name}: {e}")
        return None, None


class UploadService:
    """Service for storing files in the media library."""

    def __init__(
        self,
        upload_dir: str | Path | None = None,
        base_url: str | None = None,
        session_factory: SessionFactory = get_async_session,
    ):
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.MEDIA_UPLOAD_DIR)
        self.base_url = (base_url or settings.MEDIA_BASE_URL).rstrip("/")
        self.session_factory = session_factory

    async def upload(self, file: FileData, file_info: FileInfo) -> list[MediaFile]:
        """
        Upload a local file and store its metadata.

        Args:
            file: Local file path plus derived size and MIME type
            file_info: Name, alternative text and caption

        Returns:
            List with the created MediaFile

        Raises:
            MediaUploadError: If the file cannot be copied or recorded
        """
        source = Path(file["file_path"])
        ext = source.suffix.lower()
        stored_filename = f"{uuid.uuid4().hex}{ext}"

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, self.upload_dir / stored_filename)
        except OSError as e:
            raise MediaUploadError(file["original_filename"], f"could not store file: {e}") from e

        width, height = read_image_dimensions(source, file["mime_type"])

        try:
            async with self.session_factory() as session:
                media = MediaFile(
                    name=file_info["name"],
                    alternative_text=file_info["alternative_text"],
                    caption=file_info["caption"],
                    original_filename=file["original_filename"],
                    stored_filename=stored_filename,
                    ext=ext,
                    mime=file["mime_type"],
                    size=file["size"],
                    width=width,
                    height=height,
                    url=f"{self.base_url}/{stored_filename}",
                )
                session.add(media)
                await session.commit()
                await session.refresh(media)
        except Exception as e:
            (self.upload_dir / stored_filename).unlink(missing_ok=True)
            raise MediaUploadError(file["original_filename"], f"could not record file: {e}") from e

        logger.info(
            f"Media uploaded: {file['original_filename']} -> {stored_filename} "
            f"({file['size']} bytes, {file['mime_type']})",
            extra={"file_name": file["original_filename"], "document_id": media.id},
        )
        return [media]
