"""
Blog Seed - Seed import on first run.

Populates tags, authors and blog posts from the seed document the first
time the application starts in an environment, and opens public read
access on those content types.

Phases run strictly in order; each one commits its records before the
next one reads them:
1. Public permissions
2. Tags
3. Authors (with avatars)
4. Blog posts (cover images, author and tag relations)

Run with: python -m database.seeds.run_all_seeds
"""

import asyncio
import logging
from enum import Enum

from database.connection import SessionFactory, close_db, get_async_session, init_db
from database.roles import ensure_default_roles
from database.seeds.data import SeedData, load_seed_data
from database.seeds.first_run import get_setup_store, is_first_run
from database.seeds.seeders import (
    PUBLIC_READ_GRANTS,
    AuthorSeeder,
    BlogPostSeeder,
    MediaResolver,
    TagSeeder,
    set_public_permissions,
)
from database.store import ConfigStore
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)

# content type -> {"created": n, "failed": n, "skipped": n}
ImportReport = dict[str, dict[str, int]]


class BootstrapState(str, Enum):
    """Outcome of one bootstrap invocation."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ALREADY_IMPORTED = "already_imported"


async def import_seed_data(
    seed_data: SeedData,
    session_factory: SessionFactory = get_async_session,
    media_resolver: MediaResolver | None = None,
) -> ImportReport:
    """
    Import all seed data in dependency order.

    Per-entry and per-file failures are logged and skipped. Anything else
    propagates.

    Args:
        seed_data: Validated seed document
        session_factory: Opens database sessions
        media_resolver: Resolves avatar/cover filenames (default: seed uploads dir)

    Returns:
        Per content type statistics
    """
    media_resolver = media_resolver or MediaResolver(session_factory=session_factory)

    logger.info("\n[STEP 1] Granting public read permissions...")
    await set_public_permissions(PUBLIC_READ_GRANTS, session_factory)

    logger.info("\n[STEP 2] Seeding tags...")
    tag_seeder = TagSeeder(session_factory)
    await tag_seeder.seed(seed_data["tags"])

    logger.info("\n[STEP 3] Seeding authors...")
    author_seeder = AuthorSeeder(media_resolver, session_factory)
    await author_seeder.seed(seed_data["authors"])

    logger.info("\n[STEP 4] Seeding blog posts...")
    post_seeder = BlogPostSeeder(media_resolver, session_factory)
    await post_seeder.seed(seed_data["blogPosts"])

    return {
        seeder.content_type.value: dict(seeder.stats)
        for seeder in (tag_seeder, author_seeder, post_seeder)
    }


async def seed_example_app(
    store: ConfigStore | None = None,
    session_factory: SessionFactory = get_async_session,
    seed_data: SeedData | None = None,
    media_resolver: MediaResolver | None = None,
) -> BootstrapState:
    """
    Run the seed import if this is the first run.

    Errors from the first-run check propagate; errors during the import
    are logged and reported as FAILED.

    Args:
        store: Store holding the first-run flag (default: setup store)
        session_factory: Opens database sessions
        seed_data: Seed document (default: loaded from SEED_DATA_FILE)
        media_resolver: Resolves media filenames

    Returns:
        ALREADY_IMPORTED, SUCCEEDED or FAILED
    """
    store = store or get_setup_store(session_factory)

    if not await is_first_run(store):
        logger.info(
            "Seed data has already been imported. "
            "We cannot reimport unless you clear your database first."
        )
        return BootstrapState.ALREADY_IMPORTED

    state = BootstrapState.RUNNING
    try:
        logger.info("Setting up the template...")
        if seed_data is None:
            seed_data = load_seed_data()
        report = await import_seed_data(seed_data, session_factory, media_resolver)
        for content_type, stats in report.items():
            logger.info(
                f"  {content_type}: {stats['created']} created, "
                f"{stats['failed']} failed, {stats['skipped']} skipped"
            )
        logger.info("Ready to go")
        state = BootstrapState.SUCCEEDED
    except Exception as e:
        logger.error(f"Could not import seed data: {e}", exc_info=True)
        state = BootstrapState.FAILED

    return state


async def bootstrap(
    session_factory: SessionFactory = get_async_session,
    **kwargs,
) -> BootstrapState:
    """
    Startup hook: seed on first run without ever failing the host.

    Returns:
        Final state; FAILED when anything went wrong
    """
    try:
        return await seed_example_app(session_factory=session_factory, **kwargs)
    except Exception as e:
        logger.error(f"Seeding failed at startup: {e}", exc_info=True)
        return BootstrapState.FAILED


async def run_all_seeds() -> BootstrapState:
    """Create the schema and default roles, then bootstrap once."""
    logger.info("=" * 70)
    logger.info("Blog Seed - Database Seeding")
    logger.info("=" * 70)

    try:
        await init_db()
        await ensure_default_roles()
        state = await bootstrap()
    finally:
        await close_db()

    logger.info(f"Seeding finished: {state.value}")
    return state


if __name__ == "__main__":
    configure_logging()
    asyncio.run(run_all_seeds())
