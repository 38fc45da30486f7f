import typing
import logging

import aiohttp

import riotapi.errors as errors
import riotapi.utils.messages as messages

LOCALES = (
	"cs_CZ", "el_GR", "pl_PL", "ro_RO", "hu_HU", "en_GB", "de_DE", "es_ES", "it_IT", "fr_FR",
	"ja_JP", "ko_KR", "es_MX", "es_AR", "pt_BR", "en_US", "en_AU", "ru_RU", "tr_TR", "ms_MY",
	"en_PH", "en_SG", "th_TH", "vn_VN", "id_ID", "zh_MY", "zh_CN", "zh_TW")

REALMS = ("na", "euw", "eune", "br", "jp", "kr", "oce", "lan", "las", "ru", "tr")


class Versions:
	__slots__ = ("ddragon",)

	def __init__(self, ddragon: 'DDragon'):
		self.ddragon = ddragon

	async def all(self) -> typing.List[str]:
		return await self.ddragon.request("/api/versions.json")

	async def latest(self) -> str:
		versions = await self.all()
		return versions[0]


class Champion:
	__slots__ = ("ddragon",)

	def __init__(self, ddragon: 'DDragon'):
		self.ddragon = ddragon

	async def all(self, locale: str = None, version: str = None) -> dict:
		version = await self.ddragon.resolve_version(version)
		return await self.ddragon.request(f"/cdn/{version}/data/{locale or self.ddragon.locale}/champion.json")

	async def by_name(self, champion_name: str, locale: str = None, version: str = None) -> dict:
		if not champion_name:
			raise ValueError("champion_name is required")
		version = await self.ddragon.resolve_version(version)
		return await self.ddragon.request(
			f"/cdn/{version}/data/{locale or self.ddragon.locale}/champion/{champion_name}.json")


class DDragon(messages.MessagePrint):
	"""
	Client for Data Dragon, the static data mirror.

	Not rate limited and unauthenticated. Methods taking a `version` use
	the latest one when it is omitted.

	Args:
		host (str): Data Dragon host.
		locale (str): Default locale, one of LOCALES.
		realm (str): Default realm, one of REALMS.
		aiosession (aiohttp.ClientSession): Session to use instead of an owned one.
	"""

	logger = logging.getLogger(__name__)

	def __init__(
			self,
			host: str = "https://ddragon.leagueoflegends.com",
			locale: str = "en_GB",
			realm: str = "euw",
			aiosession: aiohttp.ClientSession = None):
		self.host = host
		self.locale = locale
		self.default_realm = realm
		self.aiosession = aiosession
		self.owns_session = aiosession is None

	def __repr__(self):
		return f"<DDragon:{self.host}>"

	@property
	def versions(self) -> Versions:
		return Versions(self)

	@property
	def champion(self) -> Champion:
		return Champion(self)

	async def close(self):
		if self.owns_session and self.aiosession is not None and not self.aiosession.closed:
			await self.aiosession.close()

	async def request(self, path: str) -> typing.Any:
		"""
		GETs a JSON document.

		Raises:
			DDragonError: The response was not a success.
		"""
		if self.aiosession is None or self.aiosession.closed:
			self.aiosession = aiohttp.ClientSession()

		url = f"{self.host}{path}"
		self.debug("GET %s", url)
		async with self.aiosession.get(
				url,
				headers={"Accept": "application/json", "Content-Type": "application/json"}) as resp:
			if resp.status >= 400:
				raise errors.DDragonError(resp.status, url)
			return await resp.json(content_type=None)

	async def resolve_version(self, version: str = None) -> str:
		return version or await self.versions.latest()

	async def realm(self, realm: str = None) -> dict:
		return await self.request(f"/realms/{realm or self.default_realm}.json")

	async def items(self, locale: str = None, version: str = None) -> dict:
		version = await self.resolve_version(version)
		return await self.request(f"/cdn/{version}/data/{locale or self.locale}/item.json")

	async def runes_reforged(self, locale: str = None, version: str = None) -> list:
		version = await self.resolve_version(version)
		return await self.request(f"/cdn/{version}/data/{locale or self.locale}/runesReforged.json")

	async def summoner_spells(self, locale: str = None, version: str = None) -> dict:
		version = await self.resolve_version(version)
		return await self.request(f"/cdn/{version}/data/{locale or self.locale}/summoner.json")

	async def profile_icons(self, locale: str = None, version: str = None) -> dict:
		version = await self.resolve_version(version)
		return await self.request(f"/cdn/{version}/data/{locale or self.locale}/profileicon.json")

	async def maps(self, locale: str = None, version: str = None) -> dict:
		version = await self.resolve_version(version)
		return await self.request(f"/cdn/{version}/data/{locale or self.locale}/map.json")
