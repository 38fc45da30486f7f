import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class SummonerEndpoint(endpoint.Endpoint):
	"""summoner-v4, routed by platform (euw1, na1, ...)."""

	name = "summoner"

	async def get_by_account_id(self, region: typing.Union[configuration.PlatformId, str], account_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.SUMMONER.GET_BY_ACCOUNT_ID,
			{"accountId": account_id},
			{"id": self.job_id(region, "getByAccountId", account_id)})

	async def get_by_summoner_name(self, region: typing.Union[configuration.PlatformId, str], summoner_name: str) -> dict:
		"""
		Gets a summoner by name.

		Args:
			region (PlatformId, str): The platform searched on.
			summoner_name (str): Summoner name, sent percent-encoded.

		Returns:
			dict: The SummonerDTO.

		Raises:
			DataNotFound: No summoner with that name.
		"""
		return await self.api.request(
			region,
			methods.METHOD_KEY.SUMMONER.GET_BY_SUMMONER_NAME,
			{"summonerName": summoner_name},
			{"id": self.job_id(region, "getBySummonerName", summoner_name)})

	async def get_by_puuid(self, region: typing.Union[configuration.PlatformId, str], puuid: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.SUMMONER.GET_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(region, "getByPUUID", puuid)})

	async def get_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.SUMMONER.GET_BY_SUMMONER_ID,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getBySummonerId", summoner_id)})

	async def get_by_access_token(self, region: typing.Union[configuration.PlatformId, str], access_token: str) -> dict:
		"""The summoner owning an RSO access token. The bearer header replaces the API key header."""
		return await self.api.request(
			region,
			methods.METHOD_KEY.SUMMONER.GET_BY_ACCESS_TOKEN,
			{},
			{
				"id": self.job_id(region, "getByAccessToken"),
				"headers": {"Authorization": f"Bearer {access_token}"},
			})
