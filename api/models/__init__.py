"""
Blog Seed - API Models module.
"""

from api.models.content import (
    AuthorResponse,
    BlogPostResponse,
    ListResponse,
    MediaFileResponse,
    TagResponse,
)

__all__ = [
    "AuthorResponse",
    "BlogPostResponse",
    "ListResponse",
    "MediaFileResponse",
    "TagResponse",
]
