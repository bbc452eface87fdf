"""
Blog Seed - Public Content API routes.

Read-only endpoints for tags, authors and blog posts. Every request is
served as the public role, so each endpoint requires the matching
permission (e.g. 'api::tag.tag.find') to be granted to that role.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from sqlalchemy import select

from api.models.content import (
    AuthorResponse,
    BlogPostResponse,
    ListResponse,
    TagResponse,
)
from database.connection import SessionFactory, get_async_session
from database.models import Author, BlogPost, ContentType, Tag
from database.roles import PUBLIC_ROLE_TYPE, role_has_permission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_session_factory() -> SessionFactory:
    """Session factory dependency (overridden in tests)."""
    return get_async_session


def require_public_permission(content_type: ContentType, action: str):
    """Dependency that rejects the request unless the public role holds the action."""
    qualified_action = content_type.action(action)

    async def check(session_factory: SessionFactory = Depends(get_session_factory)) -> None:
        async with session_factory() as session:
            allowed = await role_has_permission(session, PUBLIC_ROLE_TYPE, qualified_action)
        if not allowed:
            logger.info(f"Public access denied for {qualified_action}")
            raise HTTPException(status_code=403, detail="Forbidden")

    return check


async def _find_many(session_factory: SessionFactory, model) -> list:
    async with session_factory() as session:
        result = await session.execute(select(model).order_by(model.created_at, model.id))
        return list(result.scalars().all())


async def _find_one(session_factory: SessionFactory, model, document_id: UUID):
    async with session_factory() as session:
        instance = await session.get(model, document_id)
    if instance is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return instance


def _blog_post_response(post: BlogPost) -> BlogPostResponse:
    response = BlogPostResponse.model_validate(post)
    response.tag_ids = [tag.id for tag in post.tags]
    return response


# =============================================================================
# Tags
# =============================================================================


@router.get(
    "/tags",
    dependencies=[Depends(require_public_permission(ContentType.TAG, "find"))],
)
async def find_tags(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ListResponse[TagResponse]:
    """List all tags."""
    tags = await _find_many(session_factory, Tag)
    return ListResponse[TagResponse](
        data=[TagResponse.model_validate(tag) for tag in tags],
        total=len(tags),
    )


@router.get(
    "/tags/{document_id}",
    dependencies=[Depends(require_public_permission(ContentType.TAG, "findOne"))],
)
async def find_tag(
    document_id: UUID,
    session_factory: SessionFactory = Depends(get_session_factory),
) -> TagResponse:
    """Get one tag."""
    return TagResponse.model_validate(await _find_one(session_factory, Tag, document_id))


# =============================================================================
# Authors
# =============================================================================


@router.get(
    "/authors",
    dependencies=[Depends(require_public_permission(ContentType.AUTHOR, "find"))],
)
async def find_authors(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ListResponse[AuthorResponse]:
    """List all authors."""
    authors = await _find_many(session_factory, Author)
    return ListResponse[AuthorResponse](
        data=[AuthorResponse.model_validate(author) for author in authors],
        total=len(authors),
    )


@router.get(
    "/authors/{document_id}",
    dependencies=[Depends(require_public_permission(ContentType.AUTHOR, "findOne"))],
)
async def find_author(
    document_id: UUID,
    session_factory: SessionFactory = Depends(get_session_factory),
) -> AuthorResponse:
    """Get one author."""
    return AuthorResponse.model_validate(await _find_one(session_factory, Author, document_id))


# =============================================================================
# Blog Posts
# =============================================================================


@router.get(
    "/blog-posts",
    dependencies=[Depends(require_public_permission(ContentType.BLOG_POST, "find"))],
)
async def find_blog_posts(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ListResponse[BlogPostResponse]:
    """List all blog posts."""
    posts = await _find_many(session_factory, BlogPost)
    return ListResponse[BlogPostResponse](
        data=[_blog_post_response(post) for post in posts],
        total=len(posts),
    )


@router.get(
    "/blog-posts/{document_id}",
    dependencies=[Depends(require_public_permission(ContentType.BLOG_POST, "findOne"))],
)
async def find_blog_post(
    document_id: UUID,
    session_factory: SessionFactory = Depends(get_session_factory),
) -> BlogPostResponse:
    """Get one blog post."""
    return _blog_post_response(await _find_one(session_factory, BlogPost, document_id))
