"""
Unit tests for the in-memory scholarship store
"""
import asyncio

import pytest

from scholarship_api.scholarships.schemas import Scholarship
from scholarship_api.scholarships.store import DEFAULT_SCHOLARSHIPS, ScholarshipStore


@pytest.fixture
def store():
    return ScholarshipStore()


class TestSeeding:
    """Initial contents of the store"""

    @pytest.mark.asyncio
    async def test_default_seed(self, store):
        records = await store.read(None)
        assert set(records) == {"test", "test2"}
        assert records["test"].amount == 1000
        assert records["test2"].amount == 2000

    @pytest.mark.asyncio
    async def test_empty_seed(self):
        store = ScholarshipStore(seed=())
        assert await store.read(None) == {}

    @pytest.mark.asyncio
    async def test_listing_is_a_copy(self, store):
        records = await store.read(None)
        records.clear()
        assert len(await store.read(None)) == len(DEFAULT_SCHOLARSHIPS)


class TestRead:
    """Single-record lookup with fallback to the full listing"""

    @pytest.mark.asyncio
    async def test_read_existing(self, store):
        found = await store.read("test")
        assert found == Scholarship(name="test", amount=1000)

    @pytest.mark.asyncio
    async def test_read_without_name_lists_everything(self, store):
        found = await store.read(None)
        assert isinstance(found, dict)
        assert set(found) == {"test", "test2"}

    @pytest.mark.asyncio
    async def test_read_unknown_name_lists_everything(self, store):
        found = await store.read("missing")
        assert isinstance(found, dict)
        assert set(found) == {"test", "test2"}


class TestWrites:
    """Create, update and delete"""

    @pytest.mark.asyncio
    async def test_create_then_read(self, store):
        created = await store.create(Scholarship(name="X", amount=42))
        assert created.name == "X"
        assert await store.read("X") == created

    @pytest.mark.asyncio
    async def test_create_overwrites_same_name(self, store):
        await store.create(Scholarship(name="test", amount=1))
        assert (await store.read("test")).amount == 1

    @pytest.mark.asyncio
    async def test_update_non_zero_amount_replaces(self, store):
        current = await store.update("test", Scholarship(name="test", amount=1500))
        assert current.amount == 1500
        assert (await store.read("test")).amount == 1500

    @pytest.mark.asyncio
    async def test_update_zero_amount_is_ignored(self, store):
        current = await store.update("test", Scholarship(name="test", amount=0))
        assert current == Scholarship(name="test", amount=1000)
        assert (await store.read("test")).amount == 1000

    @pytest.mark.asyncio
    async def test_update_unknown_returns_none(self, store):
        assert await store.update("missing", Scholarship(name="missing", amount=10)) is None
        assert "missing" not in await store.read(None)

    @pytest.mark.asyncio
    async def test_update_keeps_path_key(self, store):
        await store.update("test", Scholarship(name="renamed", amount=7))
        records = await store.read(None)
        assert "renamed" not in records
        assert records["test"] == Scholarship(name="renamed", amount=7)

    @pytest.mark.asyncio
    async def test_delete_existing(self, store):
        assert await store.delete("test") is True
        assert "test" not in await store.read(None)

    @pytest.mark.asyncio
    async def test_delete_unknown(self, store):
        assert await store.delete("missing") is False
        assert set(await store.read(None)) == {"test", "test2"}


class TestLocking:
    """Every operation waits for the store lock"""

    @staticmethod
    async def _assert_blocked_until_released(store, operation):
        await store._lock.acquire()
        try:
            task = asyncio.create_task(operation)
            for _ in range(5):
                await asyncio.sleep(0)
            assert not task.done()
        finally:
            store._lock.release()
        return await asyncio.wait_for(task, timeout=1)

    @pytest.mark.asyncio
    async def test_read_waits_for_lock(self, store):
        found = await self._assert_blocked_until_released(store, store.read(None))
        assert set(found) == {"test", "test2"}

    @pytest.mark.asyncio
    async def test_create_waits_for_lock(self, store):
        await self._assert_blocked_until_released(
            store, store.create(Scholarship(name="queued", amount=3))
        )
        assert (await store.read("queued")).amount == 3

    @pytest.mark.asyncio
    async def test_update_waits_for_lock(self, store):
        current = await self._assert_blocked_until_released(
            store, store.update("test", Scholarship(name="test", amount=9))
        )
        assert current.amount == 9

    @pytest.mark.asyncio
    async def test_delete_waits_for_lock(self, store):
        assert await self._assert_blocked_until_released(store, store.delete("test2")) is True

    @pytest.mark.asyncio
    async def test_write_not_visible_while_lock_held(self, store):
        await store._lock.acquire()
        try:
            pending = asyncio.create_task(store.create(Scholarship(name="late", amount=1)))
            await asyncio.sleep(0)
            assert "late" not in store._scholarships
        finally:
            store._lock.release()
        await pending
        assert "late" in await store.read(None)
