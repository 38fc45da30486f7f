import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class ValContentEndpoint(endpoint.Endpoint):
	"""val-content-v1, routed by Valorant shard (ap, br, eu, kr, latam, na)."""

	name = "valContent"

	async def get_content(self, shard: typing.Union[configuration.PlatformId, str], locale: str = None) -> dict:
		"""
		Args:
			locale (str): e.g. "en-US". Without it every localized name is returned.
		"""
		return await self.api.request(
			shard,
			methods.METHOD_KEY.VAL_CONTENT.GET_CONTENT,
			{},
			{
				"id": self.job_id(shard, "getContent"),
				"params": {"locale": locale} if locale is not None else None,
			})


class ValMatchEndpoint(endpoint.Endpoint):
	name = "valMatch"

	async def get_by_id(self, shard: typing.Union[configuration.PlatformId, str], match_id: str) -> dict:
		return await self.api.request(
			shard,
			methods.METHOD_KEY.VAL_MATCH.GET_MATCH_BY_ID,
			{"matchId": match_id},
			{"id": self.job_id(shard, "getById", match_id)})

	async def get_matchlist_by_puuid(self, shard: typing.Union[configuration.PlatformId, str], puuid: str) -> dict:
		return await self.api.request(
			shard,
			methods.METHOD_KEY.VAL_MATCH.GET_MATCHLIST_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(shard, "getMatchlistByPUUID", puuid)})

	async def get_recent_matches_by_queue(self, shard: typing.Union[configuration.PlatformId, str], queue: str) -> dict:
		return await self.api.request(
			shard,
			methods.METHOD_KEY.VAL_MATCH.GET_RECENT_MATCHES_BY_QUEUE,
			{"queue": queue},
			{"id": self.job_id(shard, "getRecentMatchesByQueue", queue)})
