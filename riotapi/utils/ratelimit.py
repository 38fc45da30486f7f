import typing
import urllib.parse
import itertools
import asyncio
import logging
import time

import aiohttp
import redis.asyncio

import riotapi.errors as errors
import riotapi.utils.messages as messages
import riotapi.utils.methods as methods
import riotapi.utils.request as request


class Limit:
	"""`period` calls allowed `every` seconds."""

	__slots__ = (
		"period",  # type: int
		"every",  # type: float
	)

	def __init__(self, period: int, every: float):
		self.period = period
		self.every = every

	def __repr__(self):
		return "<{}/{}s>".format(self.period, self.every)

	def __eq__(self, other):
		return isinstance(other, Limit) and (self.period, self.every) == (other.period, other.every)

	def __hash__(self):
		return hash((self.period, self.every))


def parse_limits(header: str) -> typing.List[Limit]:
	"""
	Parses a rate limit header.

	>>> parse_limits("20:1,100:120")
	[<20/1.0s>, <100/120.0s>]
	"""
	limits = []
	for str_limit in header.strip().split(","):
		if not str_limit.strip():
			continue
		period, every = str_limit.split(":", 1)
		limits.append(Limit(period=int(period), every=float(every)))
	return limits


class LocalLimitStore:
	"""Window counters kept in this process."""

	__slots__ = (
		"windows",  # type: dict
	)

	def __init__(self):
		self.windows = {}

	async def acquire(self, key: str, limit: Limit) -> float:
		"""
		Takes one call from the window.

		Returns:
			float: 0 if the call was granted, else the seconds until the window resets.
		"""
		now = time.monotonic()
		window_key = f"{key}:{limit.every}"
		window = self.windows.get(window_key)

		# In case the time window has expired, and it starts again.
		if window is None or now - window[0] >= limit.every:
			window = [now, 0]
			self.windows[window_key] = window

		if window[1] >= limit.period:
			return limit.every - (now - window[0])

		window[1] += 1
		return 0

	async def close(self):
		pass


class RedisLimitStore:
	"""Window counters shared through redis, so several processes share one budget."""

	key_prefix = "fm-riot-limiter-"

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

	async def acquire(self, key: str, limit: Limit) -> float:
		window_key = f"{self.key_prefix}{key}:{limit.every}"
		window_ms = int(limit.every * 1000)

		calls = await self.client.incr(window_key)
		if calls == 1:
			await self.client.pexpire(window_key, window_ms)

		if calls <= limit.period:
			return 0

		await self.client.decr(window_key)
		ttl = await self.client.pttl(window_key)
		if ttl < 0:
			# Key lost its expiry; start the window over.
			await self.client.pexpire(window_key, window_ms)
			ttl = window_ms
		return ttl / 1000

	async def close(self):
		await self.client.aclose()


class Job:
	__slots__ = (
		"url",  # type: str
		"options",  # type: dict
		"id",  # type: str
		"expiration",  # type: int
		"queued_at",  # type: float
		"future",  # type: asyncio.Future
	)

	def __init__(self, url: str, options: dict, id: str, expiration: int, queued_at: float, future: asyncio.Future):
		self.url = url
		self.options = options
		self.id = id
		self.expiration = expiration
		self.queued_at = queued_at
		self.future = future

	def __repr__(self):
		return f"<Job:{self.id}>"


class RiotRateLimiter(messages.MessagePrint):
	"""
	Queues requests and runs them within the app and method rate limits.

	Limits are learned from the X-App-Rate-Limit and X-Method-Rate-Limit
	headers of each response. Until a bucket has seen a response it is
	only bound by `concurrency`.

	Args:
		concurrency (int): Requests executing at the same time.
		datastore (str): "local" for in-process counters, "redis" (or "shared") to
			share the counters between every limiter using the same redis.
		redis (str, dict): Redis URL or keyword arguments, for the shared datastore.
		max_retries (int): Retries of a request answered with 429.
		timeout (float): Seconds until a single HTTP call is abandoned.
		aiosession (aiohttp.ClientSession): Session to use instead of an owned one.
	"""

	logger = logging.getLogger(__name__)

	DEFAULT_PRIORITY = 5
	margin_of_error = 0.05
	# The amount of seconds added to wait time.

	def __init__(
			self,
			concurrency: int = 10,
			datastore: str = "local",
			redis: typing.Union[str, dict, None] = None,
			max_retries: int = 3,
			timeout: float = 10,
			aiosession: aiohttp.ClientSession = None):
		if concurrency < 1:
			raise errors.ConfigurationError("concurrency must be at least 1")

		if datastore == "local":
			self.store = LocalLimitStore()
		elif datastore in ("redis", "shared", "ioredis"):
			self.store = RedisLimitStore(redis)
		else:
			raise errors.ConfigurationError(f"Unknown datastore {datastore!r}")

		self.concurrency = concurrency
		self.datastore = datastore
		self.max_retries = max_retries
		self.timeout = timeout

		self.aiosession = aiosession
		self.owns_session = aiosession is None

		# bucket key -> [Limit]
		self.limits = {}

		self.queue = None  # type: asyncio.PriorityQueue
		self.workers = []
		self.loop = None
		self.sequence = itertools.count()

	def __repr__(self):
		return f"<RiotRateLimiter:{self.datastore}:{self.concurrency}>"

	def start(self):
		"""Creates the queue and workers on the running loop."""
		loop = asyncio.get_running_loop()
		if self.loop is loop and self.workers:
			return

		self.loop = loop
		self.queue = asyncio.PriorityQueue()
		self.workers = [loop.create_task(self.worker()) for _ in range(self.concurrency)]

		if self.owns_session and (self.aiosession is None or self.aiosession.closed):
			self.aiosession = aiohttp.ClientSession()

	async def close(self):
		"""
		Stops the workers and releases the session and the datastore.

		Jobs still queued or running are settled with `LimiterClosed`.
		"""
		for worker in self.workers:
			worker.cancel()
		if self.workers:
			await asyncio.gather(*self.workers, return_exceptions=True)
		self.workers = []

		dropped = 0
		while self.queue is not None and not self.queue.empty():
			_, _, job = self.queue.get_nowait()
			if not job.future.done():
				job.future.set_exception(errors.LimiterClosed(job.id))
				dropped += 1
		if dropped:
			self.info("Closed with %d queued jobs dropped", dropped)

		if self.owns_session and self.aiosession is not None and not self.aiosession.closed:
			await self.aiosession.close()
		await self.store.close()

	async def execute(self, payload: dict, meta: dict) -> typing.Any:
		"""
		Queues one request and waits for its outcome.

		Args:
			payload (dict): {"url": str, "options": {"method", "headers", "body"}}
			meta (dict): {"id": str, "priority": int, "expiration": int (ms)}

		Returns:
			The decoded JSON body.

		Raises:
			JobExpired: The job waited in queue past its expiration.
			LimiterClosed: The limiter was closed before the job finished.
			RiotAPIError: The API answered with a non-success status.
		"""
		self.start()

		priority = meta.get("priority")
		if priority is None:
			priority = self.DEFAULT_PRIORITY

		job = Job(
			url=payload["url"],
			options=payload.get("options") or {},
			id=meta.get("id"),
			expiration=meta.get("expiration"),
			queued_at=self.loop.time(),
			future=self.loop.create_future())

		await self.queue.put((priority, next(self.sequence), job))
		return await job.future

	async def worker(self):
		while True:
			_, _, job = await self.queue.get()
			try:
				await self.process(job)
			finally:
				self.queue.task_done()

	async def process(self, job: Job):
		if job.future.done():
			return

		waited = self.loop.time() - job.queued_at
		if job.expiration is not None and waited * 1000 > job.expiration:
			self.warning("Job %s expired after %.3fs in queue", job.id, waited)
			job.future.set_exception(errors.JobExpired(job.id, waited))
			return

		try:
			result = await self.run(job)
		except asyncio.CancelledError:
			# The worker is being stopped mid request.
			if not job.future.done():
				job.future.set_exception(errors.LimiterClosed(job.id))
			raise
		except Exception as e:
			# Handed to the caller awaiting the job.
			if not job.future.done():
				job.future.set_exception(e)
		else:
			if not job.future.done():
				job.future.set_result(result)

	@staticmethod
	def buckets_for(url: str) -> typing.Tuple[str, str]:
		"""The app bucket (per host) and method bucket (per host and method) charged by a URL."""
		parts = urllib.parse.urlsplit(url)
		host = parts.hostname or ""
		method = methods.registry.match(parts.path) or parts.path
		return host, f"{host}:{method}"

	async def run(self, job: Job) -> typing.Any:
		app_bucket, method_bucket = self.buckets_for(job.url)

		attempt = 0
		while True:
			await self.check_cooldown(app_bucket)
			await self.check_cooldown(method_bucket)

			try:
				data, headers = await request.make_riot_request(
					aiosession=self.aiosession,
					url=job.url,
					options=job.options,
					timeout=self.timeout)
			except errors.RateLimitExceeded as e:
				self.update_limits(app_bucket, method_bucket, e.headers)
				if attempt >= self.max_retries:
					raise
				attempt += 1
				retry_after = self.retry_after(e.headers)
				self.warning("LIMIT: 429 on %s, retrying in %ss (%d/%d)", job.id, retry_after, attempt, self.max_retries)
				await asyncio.sleep(retry_after)
				continue

			self.update_limits(app_bucket, method_bucket, headers)
			return data

	@staticmethod
	def retry_after(headers: typing.Mapping[str, str]) -> float:
		try:
			return float(headers.get("Retry-After") or 1)
		except ValueError:
			return 1.0

	async def check_cooldown(self, bucket: str):
		"""Waits until every known window of a bucket has room for one more call."""
		for limit in self.limits.get(bucket, ()):
			while True:
				time_to_sleep = await self.store.acquire(bucket, limit)
				if time_to_sleep <= 0:
					break
				self.warning("LIMIT: waiting for cooldown on %s %r. %.3fs", bucket, limit, time_to_sleep)
				await asyncio.sleep(time_to_sleep + self.margin_of_error)

	def update_limits(self, app_bucket: str, method_bucket: str, headers: typing.Mapping[str, str]):
		if not headers:
			return
		for bucket, header in ((app_bucket, "X-App-Rate-Limit"), (method_bucket, "X-Method-Rate-Limit")):
			value = headers.get(header)
			if not value:
				continue
			limits = parse_limits(value)
			if limits != self.limits.get(bucket):
				self.limits[bucket] = limits
				self.debug("Limits for %s set to %s", bucket, limits)
