"""
Blog Seed Data Module.

Seed data lives in data.json next to this module; the media files it
references live in uploads/. This module loads and validates it.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from database.seeds.data.common import (
    AuthorData,
    BlogPostData,
    SeedData,
    TagData,
    TagReference,
)
from shared.config import get_settings
from shared.errors import SeedDataError

logger = logging.getLogger(__name__)

_seed_adapter = TypeAdapter(SeedData)


def load_seed_data(path: str | Path | None = None) -> SeedData:
    """
    Load and validate the seed document.

    Args:
        path: JSON file to read (default: SEED_DATA_FILE)

    Returns:
        The validated seed data

    Raises:
        SeedDataError: If the file is missing, not JSON, or malformed
    """
    seed_path = Path(path or get_settings().SEED_DATA_FILE)

    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise SeedDataError(f"Seed data file not found: {seed_path}") from e
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Seed data file is not valid JSON: {seed_path}: {e}") from e

    try:
        data = _seed_adapter.validate_python(raw)
    except ValidationError as e:
        raise SeedDataError(f"Seed data file is malformed: {seed_path}: {e}") from e

    logger.info(
        f"Loaded seed data from {seed_path}: {len(data['tags'])} tags, "
        f"{len(data['authors'])} authors, {len(data['blogPosts'])} blog posts"
    )
    return data


__all__ = [
    # Type definitions
    "TagData",
    "AuthorData",
    "TagReference",
    "BlogPostData",
    "SeedData",
    # Loading
    "load_seed_data",
]
