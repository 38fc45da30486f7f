import pytest

import riotapi.utils.config as configuration
from riotapi.utils.config import PlatformId


def test_defaults():
	config = configuration.build_config()
	assert config.debug is False
	assert config.cache is None
	assert config.ttl_for("SUMMONER.GET_BY_PUUID") == 0


def test_build_config_from_camel_case_dict():
	config = configuration.build_config({
		"cache": {
			"cacheType": "ioredis",
			"client": "redis://localhost:6379",
			"ttls": {"byMethod": {"SUMMONER.GET_BY_PUUID": 5000}},
		},
	})
	assert config.debug is False
	assert config.cache.cache_type == "redis"
	assert config.cache.client == "redis://localhost:6379"
	assert config.ttl_for("SUMMONER.GET_BY_PUUID") == 5000
	assert config.ttl_for("SUMMONER.GET_BY_SUMMONER_ID") == 0


def test_build_config_keeps_config_instances():
	config = configuration.Config(debug=True)
	assert configuration.build_config(config) is config


def test_build_config_rejects_unknown_options():
	with pytest.raises(TypeError):
		configuration.build_config({"debgu": True})


def test_config_is_immutable():
	config = configuration.build_config({"debug": True})
	with pytest.raises(AttributeError):
		config.debug = False


@pytest.mark.parametrize("region, cluster", [
	(PlatformId.NA1, PlatformId.AMERICAS),
	(PlatformId.BR1, PlatformId.AMERICAS),
	(PlatformId.LA1, PlatformId.AMERICAS),
	(PlatformId.LA2, PlatformId.AMERICAS),
	(PlatformId.KR, PlatformId.ASIA),
	(PlatformId.JP1, PlatformId.ASIA),
	(PlatformId.EUW1, PlatformId.EUROPE),
	(PlatformId.EUNE1, PlatformId.EUROPE),
	(PlatformId.TR1, PlatformId.EUROPE),
	(PlatformId.RU, PlatformId.EUROPE),
	(PlatformId.OC1, PlatformId.SEA),
	(PlatformId.PH2, PlatformId.SEA),
	(PlatformId.SG2, PlatformId.SEA),
	(PlatformId.TH2, PlatformId.SEA),
	(PlatformId.TW2, PlatformId.SEA),
	(PlatformId.VN2, PlatformId.SEA),
	("EUW1", PlatformId.EUROPE),
	("invalid", PlatformId.AMERICAS),
])
def test_region_to_cluster(region, cluster):
	assert configuration.region_to_cluster(region) is cluster


def test_platform_id_formats_as_value():
	assert f"{PlatformId.EUW1}" == "euw1"
	assert configuration.region_value(PlatformId.EUROPE) == "europe"
