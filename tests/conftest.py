from unittest.mock import AsyncMock, MagicMock

import pytest

import riotapi.client


@pytest.fixture
def limiter():
	"""Stands in for the rate limiter; `execute` resolves to None unless configured."""
	fake = MagicMock()
	fake.execute = AsyncMock(return_value=None)
	fake.close = AsyncMock()
	return fake


@pytest.fixture
def make_api(limiter):
	def factory(config=None, token="1234"):
		return riotapi.client.RiotAPI(token, config, limiter=limiter)
	return factory


@pytest.fixture
def summoner_url():
	return "https://euw1.api.riotgames.com/lol/summoner/v4/summoners/by-name/Demos"
