"""
Key/value store backed by the core_store table.

A ConfigStore is scoped to one namespace and one deployment environment,
so the same key can hold different values per environment.
"""

__all__ = [
    "ConfigStore",
]

import logging
from typing import Any

from sqlalchemy import select

from database.connection import SessionFactory, get_async_session
from database.models import StoreEntry

logger = logging.getLogger(__name__)


class ConfigStore:
    """Persistent key/value access for one (namespace, environment) scope."""

    def __init__(
        self,
        namespace: str,
        environment: str,
        session_factory: SessionFactory = get_async_session,
    ):
        self.namespace = namespace
        self.environment = environment
        self.session_factory = session_factory

    def _query(self, key: str):
        return select(StoreEntry).where(
            StoreEntry.namespace == self.namespace,
            StoreEntry.environment == self.environment,
            StoreEntry.key == key,
        )

    async def get(self, key: str) -> Any | None:
        """
        Read a value.

        Returns:
            The stored JSON value, or None if the key has never been set
        """
        async with self.session_factory() as session:
            result = await session.execute(self._query(key))
            entry = result.scalar_one_or_none()
            return entry.value if entry else None

    async def set(self, key: str, value: Any) -> None:
        """Insert or overwrite a value."""
        async with self.session_factory() as session:
            result = await session.execute(self._query(key))
            entry = result.scalar_one_or_none()

            if entry is None:
                session.add(
                    StoreEntry(
                        namespace=self.namespace,
                        environment=self.environment,
                        key=key,
                        value=value,
                    )
                )
            else:
                entry.value = value

            await session.commit()
            logger.debug(f"Store {self.namespace}/{self.environment}: {key}={value!r}")
