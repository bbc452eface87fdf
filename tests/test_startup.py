"""
Tests for the API startup hook.

Database setup and the seed bootstrap are patched out; only the hook's
own decisions are exercised.

Run with: pytest tests/test_startup.py -v
"""

from unittest.mock import AsyncMock, patch

import pytest

import api.main
from api.main import startup_event


@pytest.fixture
def startup_mocks():
    """Patch init_db, ensure_default_roles and bootstrap in api.main."""
    with patch("api.main.init_db", new=AsyncMock()) as init_db, \
            patch("api.main.ensure_default_roles", new=AsyncMock()) as ensure_roles, \
            patch("api.main.bootstrap", new=AsyncMock()) as bootstrap:
        yield init_db, ensure_roles, bootstrap


@pytest.mark.unit
class TestStartupEvent:

    async def test_seeds_when_enabled(self, startup_mocks, monkeypatch):
        init_db, ensure_roles, bootstrap = startup_mocks
        monkeypatch.setattr(api.main.settings, "SEED_ON_STARTUP", True)

        await startup_event()

        init_db.assert_awaited_once()
        ensure_roles.assert_awaited_once()
        bootstrap.assert_awaited_once()

    async def test_skips_seed_when_disabled(self, startup_mocks, monkeypatch):
        init_db, ensure_roles, bootstrap = startup_mocks
        monkeypatch.setattr(api.main.settings, "SEED_ON_STARTUP", False)

        await startup_event()

        init_db.assert_awaited_once()
        bootstrap.assert_not_awaited()

    async def test_bootstrap_failure_does_not_abort_startup(
        self, startup_mocks, monkeypatch, caplog
    ):
        _, _, bootstrap = startup_mocks
        bootstrap.side_effect = RuntimeError("seed crashed")
        monkeypatch.setattr(api.main.settings, "SEED_ON_STARTUP", True)

        await startup_event()

        bootstrap.assert_awaited_once()
        assert "Seed bootstrap failed" in caplog.text

    async def test_database_failure_skips_seed(self, startup_mocks, monkeypatch):
        init_db, _, bootstrap = startup_mocks
        init_db.side_effect = OSError("connection refused")
        monkeypatch.setattr(api.main.settings, "SEED_ON_STARTUP", True)

        await startup_event()

        bootstrap.assert_not_awaited()
