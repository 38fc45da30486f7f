import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class ClashEndpoint(endpoint.Endpoint):
	"""clash-v1, routed by platform."""

	name = "clash"

	async def get_players_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> list:
		"""Active Clash registrations of a summoner, one per tournament."""
		return await self.api.request(
			region,
			methods.METHOD_KEY.CLASH.GET_PLAYERS_BY_SUMMONER,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getPlayersBySummonerId", summoner_id)})

	async def get_team_by_id(self, region: typing.Union[configuration.PlatformId, str], team_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CLASH.GET_TEAM,
			{"teamId": team_id},
			{"id": self.job_id(region, "getTeamById", team_id)})

	async def get_tournaments(self, region: typing.Union[configuration.PlatformId, str]) -> list:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CLASH.GET_TOURNAMENTS,
			{},
			{"id": self.job_id(region, "getTournaments")})

	async def get_tournament_by_id(self, region: typing.Union[configuration.PlatformId, str], tournament_id) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CLASH.GET_TOURNAMENT,
			{"tournamentId": tournament_id},
			{"id": self.job_id(region, "getTournamentById", tournament_id)})

	async def get_tournament_by_team_id(self, region: typing.Union[configuration.PlatformId, str], team_id: str) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.CLASH.GET_TOURNAMENT_TEAM,
			{"teamId": team_id},
			{"id": self.job_id(region, "getTournamentByTeamId", team_id)})
