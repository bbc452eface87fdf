"""
Blog Seed - Public Permissions Seeder.

Grants read actions on content types to the public role.
"""

import asyncio
import logging
import uuid

from database.connection import SessionFactory, get_async_session
from database.models import ContentType, Permission
from database.roles import PUBLIC_ROLE_TYPE, find_role

logger = logging.getLogger(__name__)

# Read access opened on every seeded content type
PUBLIC_READ_GRANTS: dict[ContentType, list[str]] = {
    ContentType.BLOG_POST: ["find", "findOne"],
    ContentType.TAG: ["find", "findOne"],
    ContentType.AUTHOR: ["find", "findOne"],
}


async def _create_permission(
    session_factory: SessionFactory,
    action: str,
    role_id: uuid.UUID,
) -> None:
    async with session_factory() as session:
        session.add(Permission(action=action, role_id=role_id))
        await session.commit()


async def set_public_permissions(
    grants: dict[ContentType, list[str]],
    session_factory: SessionFactory = get_async_session,
) -> int:
    """
    Create one permission per (content type, action) for the public role.

    All permissions are written concurrently; the first failure is raised
    once every write has finished.

    Args:
        grants: Content type -> action names (e.g. ["find", "findOne"])
        session_factory: Opens one session per permission write

    Returns:
        Number of permissions created (0 when there is no public role)
    """
    async with session_factory() as session:
        public_role = await find_role(session, PUBLIC_ROLE_TYPE)

    if public_role is None:
        logger.info("Public role not found, skipping permissions setup")
        return 0

    actions = [
        content_type.action(action)
        for content_type, content_actions in grants.items()
        for action in content_actions
    ]

    results = await asyncio.gather(
        *(_create_permission(session_factory, action, public_role.id) for action in actions),
        return_exceptions=True,
    )
    errors = [r for r in results if isinstance(r, BaseException)]
    if errors:
        logger.error(f"{len(errors)} of {len(actions)} public permission(s) failed")
        raise errors[0]

    logger.info(f"Granted {len(actions)} public permission(s)")
    return len(actions)
