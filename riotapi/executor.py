import typing
import logging

import riotapi.utils.messages as messages


class RateLimitedExecutor(messages.MessagePrint):
	"""
	Hands requests to a rate limiter and waits for the outcome.

	The limiter is anything with `async execute(payload, meta)`, such as
	`riotapi.utils.ratelimit.RiotRateLimiter`. Retries, backoff and queueing
	are the limiter's business; errors it raises reach the caller untouched.
	"""

	logger = logging.getLogger(__name__)

	__slots__ = (
		"limiter",
	)

	def __init__(self, limiter):
		self.limiter = limiter

	def __repr__(self):
		return f"<RateLimitedExecutor:{self.limiter!r}>"

	@staticmethod
	def job_meta(job: dict) -> dict:
		"""Drops unset scheduling hints so the limiter applies its own defaults."""
		return {k: v for k, v in job.items() if v is not None}

	async def execute(self, request: dict, job: dict) -> typing.Any:
		"""
		Args:
			request (dict): {"url": str, "options": {"headers": dict, "body": str, "method": str}}
			job (dict): {"id": str, "priority": int or None, "expiration": int or None}

		Returns:
			The decoded response body.
		"""
		return await self.limiter.execute(
			{"url": request["url"], "options": request["options"]},
			self.job_meta(job))

	async def close(self):
		close = getattr(self.limiter, "close", None)
		if close is not None:
			await close()
