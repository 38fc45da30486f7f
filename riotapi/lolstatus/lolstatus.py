import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class LolStatusEndpoint(endpoint.Endpoint):
	name = "lolStatus"

	async def get_platform_data(self, region: typing.Union[configuration.PlatformId, str]) -> dict:
		"""
		Maintenances and incidents of a platform.

		Returns:
			dict: The PlatformDataDto, with "maintenances" and "incidents" lists.
		"""
		return await self.api.request(
			region,
			methods.METHOD_KEY.LOL_STATUS.GET_PLATFORM_DATA,
			{},
			{"id": self.job_id(region, "getPlatformData")})
