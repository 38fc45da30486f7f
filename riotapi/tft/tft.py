import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods

TIERS = ("CHALLENGER", "GRANDMASTER", "MASTER", "DIAMOND", "PLATINUM", "GOLD", "SILVER", "BRONZE", "IRON")


class TftLeagueEndpoint(endpoint.Endpoint):
	"""tft-league-v1, routed by platform."""

	name = "tftLeague"

	async def get_challenger(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_CHALLENGER,
			{},
			{"id": self.job_id(region, "getChallenger")})

	async def get_grandmaster(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_GRANDMASTER,
			{},
			{"id": self.job_id(region, "getGrandmaster")})

	async def get_master(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_MASTER,
			{},
			{"id": self.job_id(region, "getMaster")})

	async def get_entries_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_ENTRIES_BY_SUMMONER,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getEntriesBySummonerId", summoner_id)})

	async def get_all_entries(
			self,
			region: typing.Union[configuration.PlatformId, str],
			tier: str,
			division: str,
			page: int = None) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_ALL_ENTRIES,
			{"tier": tier, "division": division},
			{
				"id": self.job_id(region, "getAllEntries", tier, division),
				"params": {"page": page} if page is not None else None,
			})

	async def get_league_by_id(self, region: typing.Union[configuration.PlatformId, str], league_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_LEAGUE.GET_LEAGUE_BY_ID,
			{"leagueId": league_id},
			{"id": self.job_id(region, "getLeagueById", league_id)})


class TftMatchEndpoint(endpoint.Endpoint):
	"""tft-match-v1, routed by cluster."""

	name = "tftMatch"

	async def get_match_ids_by_puuid(
			self,
			cluster: typing.Union[configuration.PlatformId, str],
			puuid: str,
			count: int = None) -> typing.List[str]:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.TFT_MATCH.GET_MATCH_IDS_BY_PUUID,
			{"puuid": puuid},
			{
				"id": self.job_id(cluster, "getMatchIdsByPUUID", puuid),
				"params": {"count": count} if count is not None else None,
			})

	async def get_by_id(self, cluster: typing.Union[configuration.PlatformId, str], match_id: str) -> dict:
		return await self.api.request(
			cluster,
			methods.METHOD_KEY.TFT_MATCH.GET_MATCH_BY_ID,
			{"matchId": match_id},
			{"id": self.job_id(cluster, "getById", match_id)})


class TftSummonerEndpoint(endpoint.Endpoint):
	"""tft-summoner-v1, same lookups as summoner-v4 under the TFT key."""

	name = "tftSummoner"

	async def get_by_account_id(self, region: typing.Union[configuration.PlatformId, str], account_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_SUMMONER.GET_BY_ACCOUNT_ID,
			{"accountId": account_id},
			{"id": self.job_id(region, "getByAccountId", account_id)})

	async def get_by_summoner_name(self, region: typing.Union[configuration.PlatformId, str], summoner_name: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_SUMMONER.GET_BY_SUMMONER_NAME,
			{"summonerName": summoner_name},
			{"id": self.job_id(region, "getBySummonerName", summoner_name)})

	async def get_by_puuid(self, region: typing.Union[configuration.PlatformId, str], puuid: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_SUMMONER.GET_BY_PUUID,
			{"puuid": puuid},
			{"id": self.job_id(region, "getByPUUID", puuid)})

	async def get_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.TFT_SUMMONER.GET_BY_SUMMONER_ID,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getBySummonerId", summoner_id)})
