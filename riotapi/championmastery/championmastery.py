import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class ChampionMasteryEndpoint(endpoint.Endpoint):
	name = "championMastery"

	async def get_all_champions(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CHAMPION_MASTERY.GET_ALL_CHAMPIONS,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getAllChampions", summoner_id)})

	async def get_champion(
			self,
			region: typing.Union[configuration.PlatformId, str],
			champion_id: int,
			summoner_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CHAMPION_MASTERY.GET_CHAMPION_MASTERY,
			{"championId": champion_id, "summonerId": summoner_id},
			{"id": self.job_id(region, "getChampion", champion_id, summoner_id)})

	async def get_mastery_score(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> int:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CHAMPION_MASTERY.GET_CHAMPION_MASTERY_SCORE,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getMasteryScore", summoner_id)})
