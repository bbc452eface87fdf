"""
Content API Pydantic models.

Response schemas for the public read endpoints of tags, authors and
blog posts.
"""

from datetime import datetime
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class MediaFileResponse(BaseModel):
    """Media library file as exposed to readers."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    alternative_text: str | None = None
    caption: str | None = None
    mime: str
    size: int = Field(description="File size in bytes")
    width: int | None = None
    height: int | None = None
    url: str


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    slug: str
    published_at: datetime | None = None


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    bio_fr: str | None = None
    bio_en: str | None = None
    avatar: MediaFileResponse | None = None
    published_at: datetime | None = None


class BlogPostResponse(BaseModel):
    """Blog post with its relations resolved to ids (author, tags)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title_fr: str
    title_en: str
    slug: str
    excerpt_fr: str | None = None
    excerpt_en: str | None = None
    content_fr: str | None = None
    content_en: str | None = None
    youtube_video_id: str | None = None
    cover_image: MediaFileResponse | None = None
    author_id: UUID | None = None
    tag_ids: list[UUID] = Field(default_factory=list)
    published_at: datetime | None = None


class ListResponse(BaseModel, Generic[T]):
    """Envelope for find endpoints."""

    data: list[T]
    total: int
