"""
Blog Seed - Public media serving.

Serves files stored by the upload service from MEDIA_UPLOAD_DIR.
"""

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from shared.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{filename}", response_model=None)
async def serve_media(filename: str) -> FileResponse:
    """
    Serve an uploaded media file.

    Rejects any path that resolves outside the upload directory.
    """
    upload_dir = Path(get_settings().MEDIA_UPLOAD_DIR).resolve()
    file_path = (upload_dir / filename).resolve()

    if not file_path.is_relative_to(upload_dir):
        logger.warning(f"Path traversal attempt blocked: {filename}")
        raise HTTPException(status_code=400, detail="Invalid filename")

    if not file_path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")

    return FileResponse(file_path)
