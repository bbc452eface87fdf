"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
- Test environment variables (set before any project import)
- An isolated SQLite database per test
- Media resolver fixtures pointing at temporary directories
"""

import os

# Settings are cached on first import; configure them before anything else
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "INFO"

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine

from api.services.upload_service import UploadService
from database.connection import init_db, make_session_factory
from database.roles import ensure_default_roles
from database.seeds.first_run import get_setup_store
from database.seeds.seeders.media import MediaResolver


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@pytest.fixture(scope="session", autouse=True)
def setup_logging():
    """Configure logging for tests."""
    import logging

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Reduce noise from third-party loggers
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
async def db_engine(tmp_path):
    """
    Create a test database engine on a SQLite file.

    A file (not :memory:) so concurrent sessions get their own connections.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test database."""
    return make_session_factory(db_engine)


@pytest.fixture
async def default_roles(session_factory):
    """Create the public and authenticated roles."""
    await ensure_default_roles(session_factory)


@pytest.fixture
def setup_store(session_factory):
    """Store holding the first-run flag."""
    return get_setup_store(session_factory)


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model: `await count_rows(Tag)`."""
    async def _count(model) -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count


# =============================================================================
# MEDIA FIXTURES
# =============================================================================

@pytest.fixture
def seed_uploads_dir(tmp_path):
    """Empty seed uploads directory."""
    path = tmp_path / "seed_uploads"
    path.mkdir()
    return path


@pytest.fixture
def media_dir(tmp_path):
    """Media library storage directory."""
    return tmp_path / "media"


@pytest.fixture
def upload_service(media_dir, session_factory):
    return UploadService(
        upload_dir=media_dir,
        base_url="/uploads",
        session_factory=session_factory,
    )


@pytest.fixture
def media_resolver(seed_uploads_dir, upload_service, session_factory):
    return MediaResolver(
        uploads_dir=seed_uploads_dir,
        upload_service=upload_service,
        session_factory=session_factory,
    )


# =============================================================================
# SEED DATA FIXTURES
# =============================================================================

@pytest.fixture
def minimal_seed():
    """2 tags, 1 author without avatar, 1 post tagged with the first tag."""
    return {
        "tags": [
            {"name": "Python", "slug": "python"},
            {"name": "Web", "slug": "web"},
        ],
        "authors": [
            {
                "name": "Ada",
                "bio_fr": "Bio FR",
                "bio_en": "Bio EN",
            },
        ],
        "blogPosts": [
            {
                "title_fr": "Bonjour",
                "title_en": "Hello",
                "slug": "hello",
                "excerpt_fr": "Extrait",
                "excerpt_en": "Excerpt",
                "content_fr": "Contenu",
                "content_en": "Content",
                "youtubeVideoId": "abc123",
                "author": 1,
                "tags": [{"id": 1}],
            },
        ],
    }


# =============================================================================
# MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
