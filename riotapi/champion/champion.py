import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class ChampionEndpoint(endpoint.Endpoint):
	name = "champion"

	async def get_rotations(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		"""The free champion rotation, including the one for new players."""
		return await self.api.request(
			region,
			methods.METHOD_KEY.CHAMPION.GET_CHAMPION_ROTATIONS,
			{},
			{"id": self.job_id(region, "getRotations")})
