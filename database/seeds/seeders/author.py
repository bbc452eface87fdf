"""
Blog Seed - Author Seeder.

Authors may carry an avatar, resolved through the media library before
the author is created.
"""

import logging

from database.connection import SessionFactory, get_async_session
from database.models import Author, ContentType
from database.seeds.data.common import AuthorData
from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.media import MediaResolver

logger = logging.getLogger(__name__)


class AuthorSeeder(BaseSeeder):
    """Creates one Author per seed entry."""

    content_type = ContentType.AUTHOR

    def __init__(
        self,
        media_resolver: MediaResolver,
        session_factory: SessionFactory = get_async_session,
    ):
        super().__init__(session_factory)
        self.media_resolver = media_resolver

    async def seed(self, authors: list[AuthorData]) -> list[Author]:
        """
        Create all authors in seed order.

        A missing or failed avatar leaves the author's avatar empty.

        Returns:
            The authors that were created
        """
        self.reset_stats()
        logger.info(f"Importing {len(authors)} authors...")

        created = []
        for author in authors:
            avatar = None
            if author.get("avatar"):
                avatar = await self.media_resolver.resolve(author["avatar"])

            instance = await self.create_entry(
                self.content_type,
                {
                    "name": author["name"],
                    "bio_fr": author["bio_fr"],
                    "bio_en": author["bio_en"],
                    "avatar_id": avatar.id if avatar else None,
                },
            )
            if instance is not None:
                created.append(instance)

        self.log_summary(self.content_type)
        return created
