import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class AccountEndpoint(endpoint.Endpoint):
	"""account-v1, routed by cluster (americas, asia, europe)."""

	name = "account"
	priority = 4

	async def get_by_puuid(self, region: typing.Union[configuration.PlatformId, str], puuid: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.ACCOUNT.GET_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(region, "getByPUUID", puuid), "priority": self.priority})

	async def get_by_riot_id(
			self,
			region: typing.Union[configuration.PlatformId, str],
			game_name: str,
			tag_line: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.ACCOUNT.GET_BY_RIOT_ID,
			{"gameName": game_name, "tagLine": tag_line},
			{"id": self.job_id(region, "getByRiotId", game_name, tag_line), "priority": self.priority})

	async def get_active_shard_for_player(
			self,
			region: typing.Union[configuration.PlatformId, str],
			game: str,
			puuid: str) -> dict:
		"""
		Args:
			game (str): "val" or "lor".
		"""
		return await self.api.request(
			region,
			methods.METHOD_KEY.ACCOUNT.GET_ACTIVE_SHARD_FOR_PLAYER,
			{"game": game, "puuid": puuid},
			{"id": self.job_id(region, "getActiveShardForPlayer", game, puuid)})
