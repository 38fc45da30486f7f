import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class LorMatchEndpoint(endpoint.Endpoint):
	"""lor-match-v1, routed by cluster (americas, europe, sea)."""

	name = "lorMatch"

	async def get_match_ids_by_puuid(self, cluster: typing.Union[configuration.PlatformId, str], puuid: str) -> typing.List[str]:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.LOR_MATCH.GET_MATCH_IDS_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(cluster, "getMatchIdsByPUUID", puuid)})

	async def get_by_id(self, cluster: typing.Union[configuration.PlatformId, str], match_id: str) -> dict:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.LOR_MATCH.GET_MATCH_BY_ID,
			{"matchId": match_id},
			{"id": self.job_id(cluster, "getById", match_id)})


class LorRankedEndpoint(endpoint.Endpoint):
	name = "lorRanked"

	async def get_master_tier(self, cluster: typing.Union[configuration.PlatformId, str]) -> dict:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.LOR_RANKED.GET_MASTER_TIER,
			{},
			{"id": self.job_id(cluster, "getMasterTier")})
