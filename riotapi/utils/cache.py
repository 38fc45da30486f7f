import typing
import logging
import math
import time
import json

import redis.asyncio

import riotapi.utils.messages as messages


class MemoryCache(messages.MessagePrint):
	"""
	In-process cache keyed by resolved URL.

	Expired entries are dropped when read. A falsy TTL stores the value
	without expiry; it then lives until `flush()` or until it is evicted
	by `max_entries`.

	Attributes:
		cache (dict): key -> {"expires": float or None, "value": object}
		max_entries (int): Oldest entries are evicted past this size, None for unbounded.
	"""

	logger = logging.getLogger(__name__)

	__slots__ = (
		"cache",  # type: dict
		"max_entries",  # type: int
	)

	def __init__(self, max_entries: int = None):
		self.cache = {}
		self.max_entries = max_entries

	def __repr__(self):
		return f"<MemoryCache:{len(self.cache)}>"

	async def get(self, key: str) -> typing.Any:
		entry = self.cache.get(key)
		if entry is None:
			return None

		if entry["expires"] is not None and time.time() * 1000 > entry["expires"]:
			del self.cache[key]
			return None

		return entry["value"]

	async def set(self, key: str, value: typing.Any, ttl: int = 0) -> str:
		"""
		Stores a value.

		Args:
			key (str): Cache key.
			value: Any value.
			ttl (int): Time to live in milliseconds, falsy for no expiry.
		"""
		# Re-inserting moves the key to the end, so the eviction below stays oldest-first.
		self.cache.pop(key, None)
		self.cache[key] = {
			"expires": time.time() * 1000 + ttl if ttl else None,
			"value": value,
		}

		if self.max_entries is not None:
			while len(self.cache) > self.max_entries:
				oldest = next(iter(self.cache))
				del self.cache[oldest]
				self.debug("Evicted %s", oldest)

		return "OK"

	async def flush(self) -> str:
		self.cache = {}
		return "OK"

	async def close(self):
		pass


class RedisCache(messages.MessagePrint):
	"""
	Networked cache backed by redis.

	Keys are namespaced with `key_prefix`, values are stored as JSON.
	"""

	logger = logging.getLogger(__name__)
	key_prefix = "fm-riot-api-"

	__slots__ = (
		"client",  # type: redis.asyncio.Redis
	)

	def __init__(self, client: typing.Union[str, dict, redis.asyncio.Redis, None] = None):
		if isinstance(client, redis.asyncio.Redis):
			self.client = client
		elif isinstance(client, dict):
			self.client = redis.asyncio.Redis(**client)
		else:
			self.client = redis.asyncio.from_url(client or "redis://localhost:6379")

	def __repr__(self):
		return f"<RedisCache:{self.key_prefix}>"

	async def get(self, key: str) -> typing.Any:
		payload = await self.client.get(self.key_prefix + key)
		if payload is None:
			return None
		return json.loads(payload)

	async def set(self, key: str, value: typing.Any, ttl: int = 0) -> str:
		"""
		Stores a value.

		Args:
			key (str): Cache key, without prefix.
			value: Any JSON serializable value.
			ttl (int): Time to live in milliseconds, falsy for no expiry.
				Sub-second values are rounded up to one second.
		"""
		payload = json.dumps(value)
		if not ttl:
			await self.client.set(self.key_prefix + key, payload)
		else:
			await self.client.setex(self.key_prefix + key, math.ceil(ttl / 1000), payload)
		return "OK"

	async def flush(self) -> str:
		"""Deletes every key in this cache's namespace, leaving other keys alone."""
		keys = [key async for key in self.client.scan_iter(match=self.key_prefix + "*")]
		if keys:
			await self.client.delete(*keys)
		self.debug("Flushed %d keys", len(keys))
		return "OK"

	async def close(self):
		await self.client.aclose()
