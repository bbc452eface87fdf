"""
Blog Seed - Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Generic create-and-publish operation
- Statistics tracking
"""

import json
import logging
import uuid
from typing import Any

from sqlalchemy import inspect, select

from database.connection import SessionFactory, get_async_session
from database.models import Base, ContentType, utcnow
from shared.errors import ErrorCategory, get_error_logger
from shared.logging_config import truncate_message

logger = logging.getLogger(__name__)


class BaseSeeder:
    """
    Base class for all seeders with common functionality.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, failed, skipped)
    - Generic create_entry operation (create-only, never updates)
    """

    content_type: ContentType

    def __init__(self, session_factory: SessionFactory = get_async_session):
        """
        Initialize the seeder.

        Args:
            session_factory: Opens one database session per store operation
        """
        self.session_factory = session_factory
        self.stats = {
            "created": 0,
            "failed": 0,
            "skipped": 0,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "failed": 0, "skipped": 0}

    def log_created(self, content_type: ContentType, document_id: uuid.UUID) -> None:
        """Log a created entry."""
        self.stats["created"] += 1
        logger.info(
            f"Created {content_type.value} with id: {document_id}",
            extra={"content_type": content_type.value, "document_id": document_id},
        )

    def log_failed(self, content_type: ContentType, error: Exception, fields: dict[str, Any]) -> None:
        """Log an entry that could not be created."""
        self.stats["failed"] += 1
        get_error_logger().log_error(
            error=error,
            category=ErrorCategory.DATABASE_ERROR,
            context={
                "content_type": content_type.value,
                "fields": truncate_message(_dump(fields)),
            },
        )

    def log_skipped(self, content_type: ContentType, reason: str) -> None:
        """Log a skipped entry."""
        self.stats["skipped"] += 1
        logger.info(f"  Skipped {content_type.value}: {reason}")

    def log_summary(self, content_type: ContentType) -> None:
        """Log a summary of operations."""
        logger.info(
            f"  {content_type.value}: {self.stats['created']} created, "
            f"{self.stats['failed']} failed, {self.stats['skipped']} skipped"
        )

    async def create_entry(
        self,
        content_type: ContentType,
        fields: dict[str, Any],
    ) -> Base | None:
        """
        Create and publish one record.

        List-valued relation fields hold the target ids and are resolved
        inside the same session. Any failure is logged and swallowed.

        Args:
            content_type: Which content type to create
            fields: Column values and relation ids

        Returns:
            The created record, or None if creation failed
        """
        logger.info(
            f"Creating {content_type.value}: {truncate_message(_dump(fields))}",
            extra={"content_type": content_type.value},
        )

        try:
            async with self.session_factory() as session:
                instance = await _build_instance(session, content_type, fields)
                session.add(instance)
                await session.commit()
                await session.refresh(instance)
        except Exception as e:
            self.log_failed(content_type, e, fields)
            return None

        self.log_created(content_type, instance.id)
        return instance

    async def find_many(self, content_type: ContentType) -> list[Any]:
        """
        Fetch every stored record of a content type.

        Records come back in creation order. Seeding writes one record per
        commit, so created_at is assumed distinct; equal timestamps (e.g.
        after a clock step) fall back to id order, which is arbitrary.
        """
        model = content_type.model
        async with self.session_factory() as session:
            result = await session.execute(
                select(model).order_by(model.created_at, model.id)
            )
            return list(result.scalars().all())


async def _build_instance(session, content_type: ContentType, fields: dict[str, Any]) -> Base:
    """Instantiate the model, loading list relations from their ids."""
    model = content_type.model
    relationships = inspect(model).relationships

    columns: dict[str, Any] = {}
    related: dict[str, list[Any]] = {}
    for key, value in fields.items():
        if key in relationships and relationships[key].uselist:
            target = relationships[key].mapper.class_
            ids = list(value or [])
            if ids:
                result = await session.execute(select(target).where(target.id.in_(ids)))
                related[key] = list(result.scalars().all())
            else:
                related[key] = []
        else:
            columns[key] = value

    return model(**columns, **related, published_at=utcnow())


def _dump(fields: dict[str, Any]) -> str:
    return json.dumps(fields, default=str, ensure_ascii=False, indent=2)
