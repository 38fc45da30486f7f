import typing
import json

import aiohttp

import riotapi.errors as errors


def server_message(resp_data: bytes) -> typing.Optional[str]:
	"""Pulls the message out of a Riot error body ({"status": {"message": ..., "status_code": ...}})."""
	try:
		body = json.loads(resp_data.decode())
	except (ValueError, UnicodeDecodeError):
		return None
	if isinstance(body, dict) and isinstance(body.get("status"), dict):
		return body["status"].get("message")
	return None


async def make_riot_request(
		aiosession: aiohttp.ClientSession,
		url: str,
		options: dict,
		timeout: float = 10) -> typing.Tuple[typing.Any, typing.Mapping[str, str]]:
	"""
	Makes a web request with an aiosession and returns the data.

	Args:
		aiosession:
			aiosession used to make the request.
		url:
			URL to call.
		options:
			{"method": str, "headers": dict, "body": str or None}
		timeout:
			Seconds until the request is abandoned.

	Returns:
		(object, dict)
			Contains the decoded JSON body (None when empty), and the return headers.

	Raises:
		RiotAPIError: A subclass matching the status for any non-success response.
	"""
	method = options.get("method") or "GET"

	async with aiosession.request(
			method,
			url,
			headers=options.get("headers"),
			data=options.get("body"),
			timeout=aiohttp.ClientTimeout(total=timeout)) as resp:
		resp_data = await resp.read()
		resp_headers = resp.headers
		status = resp.status

	if status >= 400:
		raise errors.from_status(
			status,
			server_message=server_message(resp_data),
			url=url,
			headers=resp_headers)

	if not resp_data:
		return None, resp_headers
	return json.loads(resp_data.decode()), resp_headers
