"""Test in-memory response cache."""

import pytest

from mention_assistant.cache.response_cache import InMemoryResponseCache


@pytest.fixture
def cache(fake_clock):
    """Create cache with a 60 second TTL and a fake clock."""
    return InMemoryResponseCache(ttl_seconds=60, clock=fake_clock)


class TestInMemoryResponseCache:
    """Test TTL cache behavior."""

    @pytest.mark.asyncio
    async def test_should_round_trip(self, cache):
        """Test put followed by get."""
        await cache.put("key", "value")

        assert await cache.get("key") == "value"

    @pytest.mark.asyncio
    async def test_should_return_none_for_missing_key(self, cache):
        """Test unknown key."""
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_should_keep_entry_until_ttl(self, cache, fake_clock):
        """Test entry at exactly TTL age is still fresh."""
        await cache.put("key", "value")
        fake_clock.return_value += 60

        assert await cache.get("key") == "value"

    @pytest.mark.asyncio
    async def test_should_expire_after_ttl(self, cache, fake_clock):
        """Test entry older than TTL is absent and dropped."""
        await cache.put("key", "value")
        fake_clock.return_value += 61

        assert await cache.get("key") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_put_should_overwrite_with_fresh_timestamp(self, cache, fake_clock):
        """Test re-insertion replaces value and resets age."""
        await cache.put("key", "old")
        fake_clock.return_value += 50
        await cache.put("key", "new")
        fake_clock.return_value += 50

        assert await cache.get("key") == "new"
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_should_keep_keys_independent(self, cache):
        """Test different keys do not interfere."""
        await cache.put("a", "1")
        await cache.put("b", "2")

        assert await cache.get("a") == "1"
        assert await cache.get("b") == "2"

    @pytest.mark.asyncio
    async def test_put_should_sweep_expired_entries_when_full(self, fake_clock):
        """Test one-off expired keys are dropped once the cache fills up."""
        cache = InMemoryResponseCache(ttl_seconds=60, clock=fake_clock, max_size=3)
        await cache.put("old-1", "a")
        await cache.put("old-2", "b")
        fake_clock.return_value += 61
        await cache.put("fresh", "c")

        await cache.put("newest", "d")

        assert len(cache) == 2
        assert await cache.get("fresh") == "c"
        assert await cache.get("newest") == "d"

    @pytest.mark.asyncio
    async def test_put_should_evict_oldest_when_full(self, fake_clock):
        """Test size bound holds when nothing has expired."""
        cache = InMemoryResponseCache(ttl_seconds=60, clock=fake_clock, max_size=2)
        await cache.put("a", "1")
        await cache.put("b", "2")
        await cache.put("a", "1 again")

        await cache.put("c", "3")

        assert len(cache) == 2
        assert await cache.get("b") is None
        assert await cache.get("a") == "1 again"
        assert await cache.get("c") == "3"

    @pytest.mark.asyncio
    async def test_overwrite_should_not_evict(self, fake_clock):
        """Test replacing a key in a full cache keeps other entries."""
        cache = InMemoryResponseCache(ttl_seconds=60, clock=fake_clock, max_size=2)
        await cache.put("a", "1")
        await cache.put("b", "2")

        await cache.put("b", "updated")

        assert len(cache) == 2
        assert await cache.get("a") == "1"

    def test_should_reject_zero_max_size(self):
        """Test invalid size bound."""
        with pytest.raises(ValueError):
            InMemoryResponseCache(max_size=0)

    def test_should_reject_negative_ttl(self):
        """Test invalid TTL."""
        with pytest.raises(ValueError):
            InMemoryResponseCache(ttl_seconds=-1)

    def test_should_expose_ttl(self, cache):
        """Test TTL property."""
        assert cache.ttl_seconds == 60
