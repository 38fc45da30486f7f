import json
from unittest.mock import AsyncMock, MagicMock

import pytest
import redis.asyncio

import riotapi.utils.cache as cache


class Clock:
	def __init__(self, now: float = 1000.0):
		self.now = now

	def __call__(self):
		return self.now


@pytest.fixture
def clock(monkeypatch):
	clock = Clock()
	monkeypatch.setattr(cache.time, "time", clock)
	return clock


class TestMemoryCache:

	@pytest.mark.asyncio
	async def test_starts_empty(self):
		assert cache.MemoryCache().cache == {}

	@pytest.mark.asyncio
	async def test_get_missing_returns_none(self):
		assert await cache.MemoryCache().get("key") is None

	@pytest.mark.asyncio
	async def test_value_lives_until_ttl(self, clock):
		mem = cache.MemoryCache()
		assert await mem.set("key", {"a": 1}, 50000) == "OK"

		clock.now += 49.999
		assert await mem.get("key") == {"a": 1}

	@pytest.mark.asyncio
	async def test_expired_value_is_evicted_on_read(self, clock):
		mem = cache.MemoryCache()
		await mem.set("key", {"a": 1}, 10)

		clock.now += 0.011
		assert await mem.get("key") is None
		assert mem.cache == {}

	@pytest.mark.asyncio
	async def test_zero_ttl_never_expires(self, clock):
		mem = cache.MemoryCache()
		await mem.set("key", {"a": 1}, 0)
		assert mem.cache["key"] == {"expires": None, "value": {"a": 1}}

		clock.now += 10 ** 9
		assert await mem.get("key") == {"a": 1}

	@pytest.mark.asyncio
	async def test_falsy_values_are_cached(self):
		mem = cache.MemoryCache()
		await mem.set("key", [], 1000)
		assert await mem.get("key") == []

	@pytest.mark.asyncio
	async def test_flush(self):
		mem = cache.MemoryCache()
		await mem.set("key", {"a": 1}, 50000)
		assert await mem.flush() == "OK"
		assert mem.cache == {}

	@pytest.mark.asyncio
	async def test_max_entries_evicts_oldest(self):
		mem = cache.MemoryCache(max_entries=2)
		await mem.set("a", 1, 0)
		await mem.set("b", 2, 0)
		await mem.set("a", 3, 0)
		await mem.set("c", 4, 0)

		assert list(mem.cache) == ["a", "c"]
		assert await mem.get("b") is None
		assert await mem.get("a") == 3


@pytest.fixture
def redis_client():
	client = MagicMock(spec=redis.asyncio.Redis)
	client.get = AsyncMock(return_value=None)
	client.set = AsyncMock(return_value=True)
	client.setex = AsyncMock(return_value=True)
	client.delete = AsyncMock(return_value=0)
	client.aclose = AsyncMock()
	return client


class TestRedisCache:

	def test_uses_given_client(self, redis_client):
		red = cache.RedisCache(redis_client)
		assert red.client is redis_client
		assert red.key_prefix == "fm-riot-api-"

	def test_builds_client_from_url(self, monkeypatch):
		from_url = MagicMock()
		monkeypatch.setattr(cache.redis.asyncio, "from_url", from_url)

		red = cache.RedisCache("redis://localhost:6739")
		from_url.assert_called_once_with("redis://localhost:6739")
		assert red.client is from_url.return_value

	@pytest.mark.asyncio
	async def test_set_converts_ttl_to_seconds(self, redis_client):
		red = cache.RedisCache(redis_client)
		assert await red.set("key", {"a": 1}, 5000) == "OK"
		redis_client.setex.assert_awaited_once_with("fm-riot-api-key", 5, json.dumps({"a": 1}))

	@pytest.mark.asyncio
	async def test_set_rounds_sub_second_ttl_up(self, redis_client):
		red = cache.RedisCache(redis_client)
		await red.set("key", {"a": 1}, 10)
		redis_client.setex.assert_awaited_once_with("fm-riot-api-key", 1, json.dumps({"a": 1}))

	@pytest.mark.asyncio
	async def test_set_without_ttl_has_no_expiry(self, redis_client):
		red = cache.RedisCache(redis_client)
		assert await red.set("key", {"a": 1}, 0) == "OK"
		redis_client.set.assert_awaited_once_with("fm-riot-api-key", json.dumps({"a": 1}))
		redis_client.setex.assert_not_awaited()

	@pytest.mark.asyncio
	async def test_get_miss(self, redis_client):
		red = cache.RedisCache(redis_client)
		assert await red.get("key") is None
		redis_client.get.assert_awaited_once_with("fm-riot-api-key")

	@pytest.mark.asyncio
	async def test_get_decodes_json(self, redis_client):
		redis_client.get.return_value = json.dumps({"a": 1}).encode()
		red = cache.RedisCache(redis_client)
		assert await red.get("key") == {"a": 1}

	@pytest.mark.asyncio
	async def test_flush_only_deletes_own_namespace(self, redis_client):
		patterns = []

		async def scan_iter(match=None):
			patterns.append(match)
			for key in (b"fm-riot-api-a", b"fm-riot-api-b"):
				yield key

		redis_client.scan_iter = scan_iter
		red = cache.RedisCache(redis_client)

		assert await red.flush() == "OK"
		assert patterns == ["fm-riot-api-*"]
		redis_client.delete.assert_awaited_once_with(b"fm-riot-api-a", b"fm-riot-api-b")
		redis_client.flushdb.assert_not_called()

	@pytest.mark.asyncio
	async def test_errors_propagate(self, redis_client):
		redis_client.get.side_effect = redis.RedisError("down")
		red = cache.RedisCache(redis_client)
		with pytest.raises(redis.RedisError):
			await red.get("key")
