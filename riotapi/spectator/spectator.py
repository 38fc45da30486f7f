import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class SpectatorEndpoint(endpoint.Endpoint):
	name = "spectator"

	async def get_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> dict:
		"""
		The game a summoner is currently playing.

		Raises:
			DataNotFound: The summoner is not in game.
		"""
		return await self.api.request(
			region,
			methods.METHOD_KEY.SPECTATOR.GET_GAME_BY_SUMMONER_ID,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getBySummonerId", summoner_id)})

	async def get_featured_games(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		return await self.api.request(
			region,
			methods.METHOD_KEY.SPECTATOR.GET_FEATURED_GAMES,
			{},
			{"id": self.job_id(region, "getFeaturedGames")})
