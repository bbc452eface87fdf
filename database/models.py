"""
Blog Seed - Database models.

This module defines SQLAlchemy ORM models for the application.
All models use UUIDs as primary keys and include timestamps.

Column types are the dialect-neutral ones (Uuid, JSON) so the same
schema runs on PostgreSQL in production and SQLite in tests.
"""

import uuid
from datetime import datetime, UTC
from enum import Enum
from typing import Any

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


# =============================================================================
# Core Store - key/value settings scoped by namespace and environment
# =============================================================================


class StoreEntry(Base):
    """
    Store entry model - Persistent key/value pairs.

    Entries are addressed by (namespace, environment, key). The first-run
    flag lives under namespace 'setup', key 'initHasRun'.
    """

    __tablename__ = "core_store"
    __table_args__ = (
        UniqueConstraint("namespace", "environment", "key", name="uq_core_store_scope_key"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    namespace: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Logical namespace (e.g., 'setup')",
    )
    environment: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Deployment environment the value belongs to",
    )
    key: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<StoreEntry({self.namespace}/{self.environment}/{self.key}={self.value!r})>"


# =============================================================================
# Access Control - roles and permissions
# =============================================================================


class Role(Base):
    """
    Role model - Access roles for the content API.

    The 'public' role is applied to unauthenticated requests.
    """

    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="Role discriminator: public, authenticated",
    )
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    permissions: Mapped[list["Permission"]] = relationship(
        "Permission",
        back_populates="role",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, type={self.type})>"


class Permission(Base):
    """
    Permission model - Grants one qualified action to a role.

    Actions look like 'api::blog-post.blog-post.find'.
    """

    __tablename__ = "permissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    action: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    role: Mapped["Role"] = relationship("Role", back_populates="permissions")

    def __repr__(self) -> str:
        return f"<Permission(action={self.action}, role_id={self.role_id})>"


# =============================================================================
# Media Library
# =============================================================================


class MediaFile(Base):
    """
    Media file model - Metadata for uploaded files.

    Files are stored locally in MEDIA_UPLOAD_DIR under a UUID-based name.
    Lookups for deduplication use `name` (filename without extension).
    """

    __tablename__ = "media_files"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    alternative_text: Mapped[str | None] = mapped_column(String(500), nullable=True)
    caption: Mapped[str | None] = mapped_column(String(500), nullable=True)
    original_filename: Mapped[str] = mapped_column(String(255), nullable=False)
    stored_filename: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    ext: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    mime: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False, comment="File size in bytes")
    width: Mapped[int | None] = mapped_column(Integer, nullable=True)
    height: Mapped[int | None] = mapped_column(Integer, nullable=True)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<MediaFile(id={self.id}, name={self.name})>"


# =============================================================================
# Content Types - tags, authors, blog posts
# =============================================================================


blog_posts_tags = Table(
    "blog_posts_tags",
    Base.metadata,
    Column("blog_post_id", Uuid, ForeignKey("blog_posts.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(Base):
    """Tag model - Blog post taxonomy."""

    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, slug={self.slug})>"


class Author(Base):
    """Author model - Bilingual biography and optional avatar."""

    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    bio_fr: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("media_files.id", ondelete="SET NULL"),
        nullable=True,
    )
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    avatar: Mapped["MediaFile | None"] = relationship("MediaFile", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name={self.name})>"


class BlogPost(Base):
    """
    Blog post model - Bilingual article.

    References one author, an ordered set of tags, an optional cover image
    and an optional YouTube video id.
    """

    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title_fr: Mapped[str] = mapped_column(String(300), nullable=False)
    title_en: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(String(300), unique=True, nullable=False, index=True)
    excerpt_fr: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_fr: Mapped[str | None] = mapped_column(Text, nullable=True)
    content_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    youtube_video_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cover_image_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("media_files.id", ondelete="SET NULL"),
        nullable=True,
    )
    author_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("authors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    cover_image: Mapped["MediaFile | None"] = relationship("MediaFile", lazy="selectin")
    author: Mapped["Author | None"] = relationship("Author", lazy="selectin")
    tags: Mapped[list["Tag"]] = relationship(
        "Tag",
        secondary=blog_posts_tags,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, slug={self.slug})>"


class ContentType(str, Enum):
    """
    The seeded content types.

    Each member maps explicitly to its qualified store name (used in
    permission actions) and to its ORM model.
    """

    TAG = "tag"
    AUTHOR = "author"
    BLOG_POST = "blog-post"

    @property
    def uid(self) -> str:
        return CONTENT_TYPE_UIDS[self]

    @property
    def model(self) -> type[Base]:
        return CONTENT_TYPE_MODELS[self]

    def action(self, name: str) -> str:
        """Qualified permission action, e.g. 'api::tag.tag.find'."""
        return f"{self.uid}.{name}"


CONTENT_TYPE_UIDS: dict[ContentType, str] = {
    ContentType.TAG: "api::tag.tag",
    ContentType.AUTHOR: "api::author.author",
    ContentType.BLOG_POST: "api::blog-post.blog-post",
}

CONTENT_TYPE_MODELS: dict[ContentType, type[Base]] = {
    ContentType.TAG: Tag,
    ContentType.AUTHOR: Author,
    ContentType.BLOG_POST: BlogPost,
}
