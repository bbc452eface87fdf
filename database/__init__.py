"""
Blog Seed - Database module.

This module contains SQLAlchemy models, the key/value store and
database connection utilities.
"""

from database.connection import (
    AsyncSessionLocal,
    SessionFactory,
    close_db,
    engine,
    get_async_session,
    init_db,
    make_session_factory,
)

__all__ = [
    "engine",
    "AsyncSessionLocal",
    "SessionFactory",
    "get_async_session",
    "make_session_factory",
    "init_db",
    "close_db",
]
