import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class MatchV5Endpoint(endpoint.Endpoint):
	"""
	match-v5, routed by cluster.

	Use `riotapi.utils.config.region_to_cluster` to find the cluster of a platform.
	"""

	name = "matchv5"

	async def get_ids_by_puuid(
			self,
			cluster: typing.Union[configuration.PlatformId, str],
			puuid: str,
			params: dict = None) -> typing.List[str]:
		"""
		Match ids of a player, most recent first.

		Args:
			cluster (PlatformId, str): americas, asia, europe or sea.
			puuid (str): Player UUID.
			params (dict): Filters; queue, type, start, count, startTime, endTime.

		Returns:
			[str]: Match ids.
		"""
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.MATCH_V5.GET_IDS_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(cluster, "getIdsByPuuid", puuid), "params": params})

	async def get_match_by_id(self, cluster: typing.Union[configuration.PlatformId, str], match_id: str) -> dict:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.MATCH_V5.GET_MATCH_BY_ID,
			{"matchId": match_id},
			{"id": self.job_id(cluster, "getMatchById", match_id)})

	async def get_match_timeline_by_id(self, cluster: typing.Union[configuration.PlatformId, str], match_id: str) -> dict:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.MATCH_V5.GET_MATCH_TIMELINE_BY_ID,
			{"matchId": match_id},
			{"id": self.job_id(cluster, "getMatchTimelineById", match_id)})
