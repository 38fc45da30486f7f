import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class ThirdPartyCodeEndpoint(endpoint.Endpoint):
	name = "thirdPartyCode"

	async def get_by_summoner_id(self, region: typing.Union[configuration.PlatformId, str], summoner_id: str) -> str:
		return await self.api.request(
			region,
			methods.METHOD_KEY.THIRD_PARTY_CODE.GET_BY_SUMMONER_ID,
			{"summonerId": summoner_id},
			{"id": self.job_id(region, "getBySummonerId", summoner_id)})
