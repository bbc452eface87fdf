"""
Blog Seed Seeders Module.

Reusable seeding logic separated from data definitions.
"""

from database.seeds.seeders.author import AuthorSeeder
from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.blog_post import BlogPostSeeder
from database.seeds.seeders.media import MediaResolver
from database.seeds.seeders.permissions import PUBLIC_READ_GRANTS, set_public_permissions
from database.seeds.seeders.tag import TagSeeder

__all__ = [
    "BaseSeeder",
    "TagSeeder",
    "AuthorSeeder",
    "BlogPostSeeder",
    "MediaResolver",
    "PUBLIC_READ_GRANTS",
    "set_public_permissions",
]
