"""
Role bootstrap and permission lookups for the content API.
"""

import logging

from sqlalchemy import select

from database.connection import SessionFactory, get_async_session
from database.models import Permission, Role

logger = logging.getLogger(__name__)

PUBLIC_ROLE_TYPE = "public"

DEFAULT_ROLES = [
    {
        "type": "public",
        "name": "Public",
        "description": "Default role given to unauthenticated users.",
    },
    {
        "type": "authenticated",
        "name": "Authenticated",
        "description": "Default role given to authenticated users.",
    },
]


async def ensure_default_roles(session_factory: SessionFactory = get_async_session) -> int:
    """
    Create the default roles that do not exist yet.

    Returns:
        Number of roles created
    """
    created = 0
    async with session_factory() as session:
        result = await session.execute(select(Role.type))
        existing = set(result.scalars().all())

        for role_data in DEFAULT_ROLES:
            if role_data["type"] in existing:
                continue
            session.add(Role(**role_data))
            created += 1

        await session.commit()

    if created:
        logger.info(f"Created {created} default role(s)")
    return created


async def find_role(session, role_type: str) -> Role | None:
    """Find a role by its type discriminator."""
    result = await session.execute(select(Role).where(Role.type == role_type))
    return result.scalar_one_or_none()


async def role_has_permission(session, role_type: str, action: str) -> bool:
    """Check whether the role of the given type holds the action."""
    result = await session.execute(
        select(Permission.id)
        .join(Role, Permission.role_id == Role.id)
        .where(Role.type == role_type, Permission.action == action)
        .limit(1)
    )
    return result.scalar_one_or_none() is not None
