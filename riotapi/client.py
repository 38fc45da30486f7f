import typing
import datetime
import logging
import json

import riotapi.errors as errors
import riotapi.executor
import riotapi.ddragon
import riotapi.utils.config as configuration
import riotapi.utils.cache as cache
import riotapi.utils.messages as messages
import riotapi.utils.ratelimit as ratelimit
import riotapi.utils.url as url_builder

import riotapi.account.account
import riotapi.champion.champion
import riotapi.championmastery.championmastery
import riotapi.clash.clash
import riotapi.league.league
import riotapi.lolstatus.lolstatus
import riotapi.lor.lor
import riotapi.match.match
import riotapi.spectator.spectator
import riotapi.summoner.summoner
import riotapi.tft.tft
import riotapi.thirdpartycode.thirdpartycode
import riotapi.tournament.tournament
import riotapi.val.val


class RequestOptions(typing.NamedTuple):
	"""
	Per-call options of `RiotAPI.request`.

	Attributes:
		id (str): Job id handed to the rate limiter, defaults to the current time.
		priority (int): Scheduling priority, None for the limiter's default.
		expiration (int): Milliseconds a job may wait in queue before it is abandoned.
		params (dict): Query parameters.
		body (object): Request body, JSON encoded before sending.
		method (str): HTTP method, defaults to GET.
		headers (dict): Replaces the default X-Riot-Token header entirely.
	"""
	id: typing.Optional[str] = None
	priority: typing.Optional[int] = None
	expiration: typing.Optional[int] = None
	params: typing.Optional[dict] = None
	body: typing.Any = None
	method: typing.Optional[str] = None
	headers: typing.Optional[dict] = None

	@classmethod
	def coerce(cls, options: typing.Union['RequestOptions', dict, None]) -> 'RequestOptions':
		if options is None:
			return cls()
		if isinstance(options, cls):
			return options
		return cls(**options)


class RiotAPI(messages.MessagePrint):
	"""
	Client for the Riot Games API.

	Resolves method keys into URLs, answers from the cache when a TTL is
	configured for the method, and otherwise sends the request through the
	rate limiter.

	Args:
		token (str): API key, sent as X-Riot-Token.
		config (Config, dict): Settings merged over the defaults, see `riotapi.utils.config.Config`.
		limiter: Object with `async execute(payload, meta)`. A `RiotRateLimiter` is created when omitted.

	Raises:
		ConfigurationError: The token is empty or the cache type is unknown.

	>>> api = RiotAPI("1234")
	>>> api.cache is None
	True
	"""

	logger = logging.getLogger(__name__)

	def __init__(self, token: str, config: typing.Union[configuration.Config, dict, None] = None, limiter=None):
		if not token:
			raise errors.ConfigurationError("token is missing")

		self.token = token
		self.config = configuration.build_config(config)

		if self.config.debug:
			messages.set_debug(True)

		cache_config = self.config.cache
		if cache_config is not None and cache_config.cache_type not in configuration.CACHE_TYPES:
			raise errors.ConfigurationError(f"Unknown cache type {cache_config.cache_type!r}")

		if limiter is None:
			limiter = ratelimit.RiotRateLimiter(
				concurrency=10,
				datastore=cache_config.cache_type if cache_config else "local",
				redis=cache_config.client if cache_config else None)
		self.limiter = limiter
		self.executor = riotapi.executor.RateLimitedExecutor(limiter)

		self.cache = None  # type: typing.Union[cache.MemoryCache, cache.RedisCache, None]
		if cache_config is not None:
			if cache_config.cache_type == "local":
				self.cache = cache.MemoryCache(max_entries=cache_config.max_entries)
			else:
				self.cache = cache.RedisCache(cache_config.client)

		self.ddragon = riotapi.ddragon.DDragon()

	def __repr__(self):
		return f"<RiotAPI:{type(self.cache).__name__ if self.cache else 'no cache'}>"

	@classmethod
	def from_env(cls, config: typing.Union[configuration.Config, dict, None] = None, **kwargs) -> 'RiotAPI':
		"""Creates a client with the key found in the RIOT_API_KEY environment variable."""
		return cls(configuration.get_api_key(), config=config, **kwargs)

	async def __aenter__(self):
		return self

	async def __aexit__(self, exc_type, exc, tb):
		await self.close()

	async def close(self):
		"""Releases the limiter's HTTP session, the cache connection and the DDragon session."""
		await self.executor.close()
		if self.cache is not None:
			await self.cache.close()
		await self.ddragon.close()

	def get_headers(self, headers: dict = None) -> dict:
		return headers if headers is not None else {"X-Riot-Token": self.token}

	def get_options(self, options: RequestOptions) -> dict:
		return {
			"headers": self.get_headers(options.headers),
			"body": json.dumps(options.body, separators=(",", ":")) if options.body is not None else None,
			"method": options.method or "GET",
		}

	@staticmethod
	def get_job_options(options: RequestOptions) -> dict:
		return {
			"id": options.id if options.id is not None else str(datetime.datetime.now()),
			"priority": options.priority,
			"expiration": options.expiration,
		}

	async def check_cache(self, method_key: str, url: str) -> typing.Any:
		if self.cache is None or self.config.ttl_for(method_key) <= 0:
			return None
		value = await self.cache.get(url)
		if value is not None:
			self.debug("Cache Hit %s %s", method_key, url)
		return value

	async def set_cache(self, method_key: str, url: str, data: typing.Any):
		ttl = self.config.ttl_for(method_key)
		if self.cache is None or ttl <= 0:
			return
		self.debug("Setting %s %s %s", method_key, url, ttl)
		await self.cache.set(url, data, ttl)

	async def request(
			self,
			region: typing.Union[configuration.PlatformId, str],
			method_key: str,
			path_data: typing.Mapping[str, typing.Any] = None,
			options: typing.Union[RequestOptions, dict, None] = None) -> typing.Any:
		"""
		Requests one endpoint.

		Args:
			region (PlatformId, str): Platform or cluster to route to.
			method_key (str): Dotted method key, see `riotapi.utils.methods.METHOD_KEY`.
			path_data (dict): Values for the path template placeholders.
			options (RequestOptions, dict): Per-call options.

		Returns:
			The decoded JSON response, or the cached value.

		Raises:
			RegistryLookupError: Unknown method key, before any I/O.
			PathParameterError: A path placeholder has no value, before any I/O.
			RiotAPIError, JobExpired, LimiterClosed: Raised by the rate limiter, unchanged.
		"""
		options = RequestOptions.coerce(options)
		url = url_builder.resolve(region, method_key, path_data, options.params)

		cached = await self.check_cache(method_key, url)
		if cached is not None:
			return cached

		resp = await self.executor.execute(
			{"url": url, "options": self.get_options(options)},
			self.get_job_options(options))

		await self.set_cache(method_key, url, resp)
		return resp

	@property
	def account(self) -> riotapi.account.account.AccountEndpoint:
		return riotapi.account.account.AccountEndpoint(self)

	@property
	def champion_mastery(self) -> riotapi.championmastery.championmastery.ChampionMasteryEndpoint:
		return riotapi.championmastery.championmastery.ChampionMasteryEndpoint(self)

	@property
	def league(self) -> riotapi.league.league.LeagueEndpoint:
		return riotapi.league.league.LeagueEndpoint(self)

	@property
	def match_v5(self) -> riotapi.match.match.MatchV5Endpoint:
		return riotapi.match.match.MatchV5Endpoint(self)

	@property
	def spectator(self) -> riotapi.spectator.spectator.SpectatorEndpoint:
		return riotapi.spectator.spectator.SpectatorEndpoint(self)

	@property
	def summoner(self) -> riotapi.summoner.summoner.SummonerEndpoint:
		return riotapi.summoner.summoner.SummonerEndpoint(self)

	@property
	def champion(self) -> riotapi.champion.champion.ChampionEndpoint:
		return riotapi.champion.champion.ChampionEndpoint(self)

	@property
	def clash(self) -> riotapi.clash.clash.ClashEndpoint:
		return riotapi.clash.clash.ClashEndpoint(self)

	@property
	def league_exp(self) -> riotapi.league.league.LeagueExpEndpoint:
		return riotapi.league.league.LeagueExpEndpoint(self)

	@property
	def lol_status(self) -> riotapi.lolstatus.lolstatus.LolStatusEndpoint:
		return riotapi.lolstatus.lolstatus.LolStatusEndpoint(self)

	@property
	def lor_match(self) -> riotapi.lor.lor.LorMatchEndpoint:
		return riotapi.lor.lor.LorMatchEndpoint(self)

	@property
	def lor_ranked(self) -> riotapi.lor.lor.LorRankedEndpoint:
		return riotapi.lor.lor.LorRankedEndpoint(self)

	@property
	def tft_league(self) -> riotapi.tft.tft.TftLeagueEndpoint:
		return riotapi.tft.tft.TftLeagueEndpoint(self)

	@property
	def tft_match(self) -> riotapi.tft.tft.TftMatchEndpoint:
		return riotapi.tft.tft.TftMatchEndpoint(self)

	@property
	def tft_summoner(self) -> riotapi.tft.tft.TftSummonerEndpoint:
		return riotapi.tft.tft.TftSummonerEndpoint(self)

	@property
	def third_party_code(self) -> riotapi.thirdpartycode.thirdpartycode.ThirdPartyCodeEndpoint:
		return riotapi.thirdpartycode.thirdpartycode.ThirdPartyCodeEndpoint(self)

	@property
	def tournament_stub(self) -> riotapi.tournament.tournament.TournamentStubEndpoint:
		return riotapi.tournament.tournament.TournamentStubEndpoint(self)

	@property
	def tournament(self) -> riotapi.tournament.tournament.TournamentEndpoint:
		return riotapi.tournament.tournament.TournamentEndpoint(self)

	@property
	def val_content(self) -> riotapi.val.val.ValContentEndpoint:
		return riotapi.val.val.ValContentEndpoint(self)

	@property
	def val_match(self) -> riotapi.val.val.ValMatchEndpoint:
		return riotapi.val.val.ValMatchEndpoint(self)
