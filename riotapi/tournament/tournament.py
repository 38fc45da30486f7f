import typing

import riotapi.utils.config as configuration
import riotapi.utils.endpoint as endpoint
import riotapi.utils.methods as methods


class TournamentStubEndpoint(endpoint.Endpoint):
	"""
	tournament-stub-v4, the mock of tournament-v4 for development keys.

	Tournament calls are only served by the Americas cluster.
	"""

	name = "tournamentStub"
	region = configuration.PlatformId.AMERICAS
	priority = None  # type: int
	keys = methods.METHOD_KEY.TOURNAMENT_STUB

	def options(self, name: str, *args, **kwargs) -> dict:
		options = {"id": self.job_id(self.region, name, *args), "priority": self.priority}
		options.update(kwargs)
		return options

	async def create_codes(self, tournament_id: int, count: int, body: dict) -> typing.List[str]:
		"""
		Args:
			tournament_id (int): Tournament the codes are for.
			count (int): Number of codes to create.
			body (dict): The TournamentCodeParameters.
		"""
		return await self.api.request(
			self.region,
			self.keys.POST_CREATE_CODES,
			{},
			self.options(
				"createCodes",
				tournament_id,
				params={"count": count, "tournamentId": tournament_id},
				body=body,
				method="POST"))

	async def get_lobby_events_by_tournament_code(self, tournament_code: str) -> dict:
		return await self.api.request(
			self.region,
			self.keys.GET_LOBBY_EVENTS_BY_TOURNAMENT_CODE,
			{"tournamentCode": tournament_code},
			self.options("getLobbyEventsByTournamentCode", tournament_code))

	async def create_provider(self, body: dict) -> int:
		"""
		Args:
			body (dict): {"region": "EUW", "url": callback URL}
		"""
		return await self.api.request(
			self.region,
			self.keys.POST_CREATE_PROVIDER,
			{},
			self.options("createProvider", body=body, method="POST"))

	async def create_tournament(self, body: dict) -> int:
		return await self.api.request(
			self.region,
			self.keys.POST_CREATE_TOURNAMENT,
			{},
			self.options("createTournament", body=body, method="POST"))


class TournamentEndpoint(TournamentStubEndpoint):
	"""tournament-v4. Scheduled ahead of every other call."""

	name = "tournament"
	priority = 0
	keys = methods.METHOD_KEY.TOURNAMENT

	async def get_by_tournament_code(self, tournament_code: str) -> dict:
		return await self.api.request(
			self.region,
			self.keys.GET_TOURNAMENT_BY_CODE,
			{"tournamentCode": tournament_code},
			self.options("getByTournamentCode", tournament_code))

	async def update_by_tournament_code(self, tournament_code: str, body: dict):
		return await self.api.request(
			self.region,
			self.keys.PUT_TOURNAMENT_CODE,
			{"tournamentCode": tournament_code},
			self.options("updateByTournamentCode", tournament_code, body=body, method="PUT"))
