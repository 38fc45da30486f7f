from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

import riotapi.errors as errors
import riotapi.utils.request as request

URL = "https://euw1.api.riotgames.com/lol/summoner/v4/summoners/by-name/Demos"
OPTIONS = {"headers": {"X-Riot-Token": "1234"}, "body": None, "method": "GET"}


def session_returning(status, body=b"", headers=None):
	resp = MagicMock()
	resp.status = status
	resp.read = AsyncMock(return_value=body)
	resp.headers = headers or {}
	session = MagicMock()
	session.request.return_value.__aenter__.return_value = resp
	return session


@pytest.mark.asyncio
async def test_success():
	session = session_returning(200, b'{"name": "Demos"}', {"X-App-Rate-Limit": "20:1"})

	data, headers = await request.make_riot_request(session, URL, OPTIONS)

	assert data == {"name": "Demos"}
	assert headers == {"X-App-Rate-Limit": "20:1"}
	session.request.assert_called_once_with(
		"GET", URL, headers={"X-Riot-Token": "1234"}, data=None, timeout=aiohttp.ClientTimeout(total=10))


@pytest.mark.asyncio
async def test_empty_body():
	data, _ = await request.make_riot_request(session_returning(204), URL, {"method": "POST", "body": "{}"})
	assert data is None


@pytest.mark.asyncio
async def test_not_found():
	body = b'{"status": {"message": "Data not found - summoner not found", "status_code": 404}}'
	session = session_returning(404, body, {"Content-Type": "application/json"})

	with pytest.raises(errors.DataNotFound) as exc:
		await request.make_riot_request(session, URL, OPTIONS)

	assert exc.value.status_code == 404
	assert exc.value.server_message == "Data not found - summoner not found"
	assert exc.value.url == URL
	assert str(exc.value) == "<404> Data not found: Data not found - summoner not found"


@pytest.mark.asyncio
async def test_rate_limited_keeps_headers():
	session = session_returning(429, b"", {"Retry-After": "2"})

	with pytest.raises(errors.RateLimitExceeded) as exc:
		await request.make_riot_request(session, URL, OPTIONS)
	assert exc.value.headers == {"Retry-After": "2"}


@pytest.mark.asyncio
async def test_unknown_status():
	with pytest.raises(errors.RiotAPIError) as exc:
		await request.make_riot_request(session_returning(418, b"teapot"), URL, OPTIONS)
	assert exc.value.status_code == 418
	assert exc.value.server_message is None


@pytest.mark.parametrize("body, expected", [
	(b'{"status": {"message": "Forbidden", "status_code": 403}}', "Forbidden"),
	(b"<html></html>", None),
	(b'["not", "a", "status"]', None),
	(b"\xff", None),
])
def test_server_message(body, expected):
	assert request.server_message(body) == expected
