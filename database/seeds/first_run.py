"""
First-run gate for the seed import.

The flag is read and then immediately marked as set, so the check itself
records that seeding has started.
"""

import logging

from database.connection import SessionFactory, get_async_session
from database.store import ConfigStore
from shared.config import get_settings

logger = logging.getLogger(__name__)

SETUP_NAMESPACE = "setup"
INIT_HAS_RUN_KEY = "initHasRun"


def get_setup_store(session_factory: SessionFactory = get_async_session) -> ConfigStore:
    """Store holding the first-run flag for the current environment."""
    return ConfigStore(SETUP_NAMESPACE, get_settings().ENVIRONMENT, session_factory)


async def is_first_run(store: ConfigStore) -> bool:
    """
    Check whether seeding has ever started in this environment.

    Always writes the flag as true after reading it. Storage errors
    propagate to the caller.

    Returns:
        True only if the flag was absent or false before this call
    """
    init_has_run = await store.get(INIT_HAS_RUN_KEY)
    await store.set(INIT_HAS_RUN_KEY, True)
    return not init_has_run
