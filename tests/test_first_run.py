"""
Tests for the first-run gate and the key/value store behind it.

Run with: pytest tests/test_first_run.py -v
"""

from unittest.mock import AsyncMock

import pytest

from database.seeds.first_run import INIT_HAS_RUN_KEY, SETUP_NAMESPACE, is_first_run
from database.store import ConfigStore


class TestConfigStore:
    """Tests for ConfigStore."""

    async def test_get_missing_key_returns_none(self, session_factory):
        store = ConfigStore("setup", "test", session_factory)

        assert await store.get("missing") is None

    async def test_set_then_get(self, session_factory):
        store = ConfigStore("setup", "test", session_factory)

        await store.set("answer", {"value": 42})

        assert await store.get("answer") == {"value": 42}

    async def test_set_overwrites(self, session_factory):
        store = ConfigStore("setup", "test", session_factory)

        await store.set("flag", False)
        await store.set("flag", True)

        assert await store.get("flag") is True

    async def test_values_are_scoped_by_environment(self, session_factory):
        production = ConfigStore("setup", "production", session_factory)
        development = ConfigStore("setup", "development", session_factory)

        await production.set("flag", True)

        assert await development.get("flag") is None

    async def test_values_are_scoped_by_namespace(self, session_factory):
        await ConfigStore("setup", "test", session_factory).set("flag", True)

        assert await ConfigStore("other", "test", session_factory).get("flag") is None


class TestIsFirstRun:
    """Tests for the first-run check-and-mark."""

    async def test_first_call_true_second_false(self, setup_store):
        assert await is_first_run(setup_store) is True
        assert await is_first_run(setup_store) is False

    async def test_flag_persisted_after_check(self, setup_store):
        """The check alone marks the flag, even without importing."""
        await is_first_run(setup_store)

        assert await setup_store.get(INIT_HAS_RUN_KEY) is True

    async def test_flag_uses_setup_namespace_and_environment(self, setup_store):
        assert setup_store.namespace == SETUP_NAMESPACE
        assert setup_store.environment == "test"

    async def test_false_flag_counts_as_first_run(self, setup_store):
        await setup_store.set(INIT_HAS_RUN_KEY, False)

        assert await is_first_run(setup_store) is True
        assert await setup_store.get(INIT_HAS_RUN_KEY) is True

    async def test_storage_error_propagates(self):
        store = AsyncMock()
        store.get.side_effect = RuntimeError("store unavailable")

        with pytest.raises(RuntimeError):
            await is_first_run(store)

        store.set.assert_not_called()
