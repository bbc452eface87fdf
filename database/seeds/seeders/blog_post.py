"""
Blog Seed - Blog Post Seeder.

Blog posts reference tags and authors that earlier phases created. Those
are fetched back from the database when this phase starts, so relations
point at whatever the store holds rather than at in-memory results.
"""

import logging
from typing import Any

from database.connection import SessionFactory, get_async_session
from database.models import Author, BlogPost, ContentType, Tag
from database.seeds.data.common import BlogPostData, TagReference
from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.media import MediaResolver

logger = logging.getLogger(__name__)


def select_author(all_authors: list[Author]) -> Author | None:
    """
    Author for a blog post: always the first stored author.

    The post's own `author` field is ignored.
    """
    return all_authors[0] if all_authors else None


def resolve_tags(references: list[TagReference], all_tags: list[Tag]) -> list[Tag]:
    """
    Map 1-based tag positions onto the stored tag list.

    Positions with no matching tag are dropped.
    """
    resolved = []
    for reference in references:
        position = reference["id"]
        if 1 <= position <= len(all_tags):
            resolved.append(all_tags[position - 1])
        else:
            logger.debug(f"Dropping tag reference {position}: only {len(all_tags)} tags stored")
    return resolved


class BlogPostSeeder(BaseSeeder):
    """Creates one BlogPost per seed entry."""

    content_type = ContentType.BLOG_POST

    def __init__(
        self,
        media_resolver: MediaResolver,
        session_factory: SessionFactory = get_async_session,
    ):
        super().__init__(session_factory)
        self.media_resolver = media_resolver

    async def seed(self, blog_posts: list[BlogPostData]) -> list[BlogPost]:
        """
        Create all blog posts in seed order.

        Fetching the stored tags and authors is not guarded: a failure
        there aborts the import.

        Returns:
            The blog posts that were created
        """
        self.reset_stats()
        logger.info(f"Importing {len(blog_posts)} blog posts...")

        all_tags = await self.find_many(ContentType.TAG)
        all_authors = await self.find_many(ContentType.AUTHOR)
        logger.info(f"Found {len(all_tags)} tags and {len(all_authors)} authors for relations")

        created = []
        for post in blog_posts:
            cover_image = None
            if post.get("coverImage"):
                cover_image = await self.media_resolver.resolve(post["coverImage"])

            author = select_author(all_authors)
            tags = resolve_tags(post.get("tags") or [], all_tags)

            fields: dict[str, Any] = {
                "title_fr": post["title_fr"],
                "title_en": post["title_en"],
                "slug": post["slug"],
                "excerpt_fr": post["excerpt_fr"],
                "excerpt_en": post["excerpt_en"],
                "content_fr": post["content_fr"],
                "content_en": post["content_en"],
                "cover_image_id": cover_image.id if cover_image else None,
                "youtube_video_id": post.get("youtubeVideoId"),
                "author_id": author.id if author else None,
                "tags": [tag.id for tag in tags],
            }

            instance = await self.create_entry(self.content_type, fields)
            if instance is not None:
                created.append(instance)

        self.log_summary(self.content_type)
        return created
