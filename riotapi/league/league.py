import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods

QUEUES = ("RANKED_SOLO_5x5", "RANKED_FLEX_SR", "RANKED_FLEX_TT", "RANKED_TFT")
TIERS = ("CHALLENGER", "GRANDMASTER", "MASTER", "DIAMOND", "PLATINUM", "GOLD", "SILVER", "BRONZE", "IRON")
DIVISIONS = ("I", "II", "III", "IV")


class LeagueEndpoint(endpoint.Endpoint):
	"""league-v4, routed by platform."""

	name = "league"

	async def get_challenger_by_queue(self, region: typing.Union[configuration.PlatformId, str], queue: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_CHALLENGER_BY_QUEUE,
			{"queue": queue},
			{"id": self.job_id(region, "getChallengerByQueue", queue)})

	async def get_grandmaster_by_queue(self, region: typing.Union[configuration.PlatformId, str], queue: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_GRANDMASTER_BY_QUEUE,
			{"queue": queue},
			{"id": self.job_id(region, "getGrandmasterByQueue", queue)})

	async def get_master_by_queue(self, region: typing.Union[configuration.PlatformId, str], queue: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_MASTER_BY_QUEUE,
			{"queue": queue},
			{"id": self.job_id(region, "getMasterByQueue", queue)})

	async def get_entries_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_ENTRIES_BY_SUMMONER,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getEntriesBySummonerId", summoner_id)})

	async def get_all_entries(
			self,
			region: typing.Union[configuration.PlatformId, str],
			queue: str,
			tier: str,
			division: str,
			page: int = None) -> list:
		"""
		Paginated entries of a sub-master tier.

		Args:
			queue (str): One of QUEUES.
			tier (str): One of TIERS, upper case.
			division (str): One of DIVISIONS.
			page (int): Page number, starting at 1.
		"""
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_ALL_ENTRIES,
			{"queue": queue, "tier": tier, "division": division},
			{
				"id": self.job_id(region, "getAllEntries", queue, tier, division),
				"params": {"page": page} if page is not None else None,
			})

	async def get_by_id(self, region: typing.Union[configuration.PlatformId, str], league_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE.GET_LEAGUE_BY_ID,
			{"leagueId": league_id},
			{"id": self.job_id(region, "getById", league_id)})


class LeagueExpEndpoint(endpoint.Endpoint):
	"""league-exp-v4, like `get_all_entries` but also serves the apex tiers."""

	name = "leagueExp"

	async def get_league_entries(
			self,
			region: typing.Union[configuration.PlatformId, str],
			queue: str,
			tier: str,
			division: str,
			page: int = None) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.LEAGUE_EXP.GET_LEAGUE_ENTRIES,
			{"queue": queue, "tier": tier, "division": division},
			{
				"id": self.job_id(region, "getLeagueEntries", queue, tier, division),
				"params": {"page": page} if page is not None else None,
			})
