import typing
import enum
import os


class PlatformId(str, enum.Enum):
	"""Routing values accepted by the Riot API hosts."""
	# League of Legends / TFT platforms
	BR1 = "br1"
	EUNE1 = "eun1"
	EUW1 = "euw1"
	JP1 = "jp1"
	KR = "kr"
	LA1 = "la1"
	LA2 = "la2"
	NA1 = "na1"
	OC1 = "oc1"
	PH2 = "ph2"
	RU = "ru"
	SG2 = "sg2"
	TH2 = "th2"
	TR1 = "tr1"
	TW2 = "tw2"
	VN2 = "vn2"
	PBE1 = "pbe1"

	# Regional clusters
	AMERICAS = "americas"
	ASIA = "asia"
	EUROPE = "europe"
	SEA = "sea"

	# Valorant shards
	AP = "ap"
	BR = "br"
	EU = "eu"
	LATAM = "latam"
	NA = "na"

	def __str__(self):
		return self.value


clusters = {
	PlatformId.NA1: PlatformId.AMERICAS,
	PlatformId.BR1: PlatformId.AMERICAS,
	PlatformId.LA1: PlatformId.AMERICAS,
	PlatformId.LA2: PlatformId.AMERICAS,

	PlatformId.KR: PlatformId.ASIA,
	PlatformId.JP1: PlatformId.ASIA,

	PlatformId.EUW1: PlatformId.EUROPE,
	PlatformId.EUNE1: PlatformId.EUROPE,
	PlatformId.TR1: PlatformId.EUROPE,
	PlatformId.RU: PlatformId.EUROPE,

	PlatformId.OC1: PlatformId.SEA,
	PlatformId.PH2: PlatformId.SEA,
	PlatformId.SG2: PlatformId.SEA,
	PlatformId.TH2: PlatformId.SEA,
	PlatformId.TW2: PlatformId.SEA,
	PlatformId.VN2: PlatformId.SEA,
}


def region_value(region: typing.Union[PlatformId, str]) -> str:
	"""The plain string used in hosts, cache keys and job ids."""
	if isinstance(region, enum.Enum):
		return region.value
	return str(region)


def region_to_cluster(region: typing.Union[PlatformId, str]) -> PlatformId:
	"""Maps a platform to the cluster serving its account and match data.

	Unknown values fall back to the Americas cluster.
	"""
	try:
		return clusters.get(PlatformId(region_value(region).lower()), PlatformId.AMERICAS)
	except ValueError:
		return PlatformId.AMERICAS


CACHE_TYPES = ("local", "redis")


class CacheConfig(typing.NamedTuple):
	"""
	Cache settings.

	Attributes:
		cache_type (str): "local" for an in-process cache, "redis" for a networked one.
		client (str, dict): Redis URL or keyword arguments for the redis client.
		ttls (dict): {"by_method": {method_key: milliseconds}}
		max_entries (int): Upper bound for the in-process cache, None for unbounded.
	"""
	cache_type: str = "local"
	client: typing.Union[str, dict, None] = None
	ttls: typing.Optional[dict] = None
	max_entries: typing.Optional[int] = None

	def ttl_for(self, method_key: str) -> int:
		"""Configured TTL in milliseconds, 0 when the method is not cached."""
		if not self.ttls:
			return 0
		by_method = self.ttls.get("by_method") or self.ttls.get("byMethod") or {}
		return by_method.get(method_key) or 0

	@classmethod
	def from_dict(cls, data: dict) -> 'CacheConfig':
		cache_type = data.get("cache_type", data.get("cacheType", "local"))
		if cache_type == "ioredis":
			cache_type = "redis"
		return cls(
			cache_type=cache_type,
			client=data.get("client"),
			ttls=data.get("ttls"),
			max_entries=data.get("max_entries", data.get("maxEntries")))


class Config(typing.NamedTuple):
	debug: bool = False
	cache: typing.Optional[CacheConfig] = None

	def ttl_for(self, method_key: str) -> int:
		if self.cache is None:
			return 0
		return self.cache.ttl_for(method_key)


DEFAULT_CONFIG = Config()


def build_config(overrides: typing.Union[Config, dict, None] = None) -> Config:
	"""
	Shallow-merges the caller's settings over the defaults.

	Args:
		overrides (Config, dict): Settings supplied by the caller.

	Returns:
		Config: A new, immutable configuration.

	>>> build_config({"cache": {"cacheType": "local"}}).cache.cache_type
	'local'
	>>> build_config().debug
	False
	"""
	if overrides is None:
		return DEFAULT_CONFIG
	if isinstance(overrides, Config):
		return overrides

	values = dict(overrides)
	cache = values.get("cache")
	if isinstance(cache, dict):
		values["cache"] = CacheConfig.from_dict(cache)

	unknown = set(values) - set(Config._fields)
	if unknown:
		raise TypeError(f"Unknown config options: {', '.join(sorted(unknown))}")

	return DEFAULT_CONFIG._replace(**values)


def get_api_key() -> typing.Optional[str]:
	return os.environ.get("RIOT_API_KEY")
