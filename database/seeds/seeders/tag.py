"""
Blog Seed - Tag Seeder.
"""

import logging

from database.models import ContentType, Tag
from database.seeds.data.common import TagData
from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)


class TagSeeder(BaseSeeder):
    """Creates one Tag per seed entry."""

    content_type = ContentType.TAG

    async def seed(self, tags: list[TagData]) -> list[Tag]:
        """
        Create all tags in seed order.

        Returns:
            The tags that were created (failed entries are left out)
        """
        self.reset_stats()
        logger.info(f"Importing {len(tags)} tags...")

        created = []
        for tag in tags:
            instance = await self.create_entry(
                self.content_type,
                {
                    "name": tag["name"],
                    "slug": tag["slug"],
                },
            )
            if instance is not None:
                created.append(instance)

        self.log_summary(self.content_type)
        return created
