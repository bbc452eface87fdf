"""
Blog Seed Data - Common Types.

This module defines TypedDict types matching the on-disk seed document
(data.json). Field names follow the JSON keys.
"""

from typing import Any

# typing_extensions variants: pydantic validates these on Python < 3.12
from typing_extensions import NotRequired, TypedDict


# =============================================================================
# Type Definitions
# =============================================================================

class TagData(TypedDict):
    """Tag data structure."""
    name: str
    slug: str


class AuthorData(TypedDict):
    """Author data structure."""
    name: str
    bio_fr: str
    bio_en: str
    avatar: NotRequired[str | None]  # filename under the seed uploads directory


class TagReference(TypedDict):
    """1-based position of a tag in the list of stored tags."""
    id: int


class BlogPostData(TypedDict):
    """Blog post data structure."""
    title_fr: str
    title_en: str
    slug: str
    excerpt_fr: str
    excerpt_en: str
    content_fr: str
    content_en: str
    coverImage: NotRequired[str | None]
    youtubeVideoId: NotRequired[str | None]
    author: NotRequired[Any]  # ignored: posts take the first stored author
    tags: NotRequired[list[TagReference]]


class SeedData(TypedDict):
    """The whole seed document."""
    tags: list[TagData]
    authors: list[AuthorData]
    blogPosts: list[BlogPostData]
