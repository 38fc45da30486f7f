import typing
import urllib.parse

import riotapi.errors as errors
import riotapi.utils.config as config
import riotapi.utils.methods as methods

# Characters left alone by the component encoding, besides letters, digits and "-_.~".
SAFE = "!*'()"


def escape(value) -> str:
	"""Percent-encodes a single URI component."""
	if isinstance(value, bool):
		value = "true" if value else "false"
	return urllib.parse.quote(str(value), safe=SAFE)


def encode_query(params: typing.Mapping[str, typing.Any]) -> str:
	"""
	Encodes query parameters, repeating the key for every element of a list.

	>>> encode_query({"queue": 420, "type": "ranked"})
	'queue=420&type=ranked'
	>>> encode_query({"champion": [1, 2], "name": "Demos Kratos"})
	'champion=1&champion=2&name=Demos%20Kratos'
	>>> encode_query({"startTime": None})
	'startTime='
	"""
	parts = []
	for key, value in params.items():
		key = escape(key)
		if isinstance(value, (list, tuple)):
			parts.extend(f"{key}={escape(v)}" for v in value)
		elif value is None:
			parts.append(f"{key}=")
		else:
			parts.append(f"{key}={escape(value)}")
	return "&".join(parts)


def create_host(region: typing.Union[config.PlatformId, str]) -> str:
	return methods.HOST.format(platformId=escape(config.region_value(region)))


def create_path(method_key: str, path_data: typing.Mapping[str, typing.Any] = None) -> str:
	template = methods.get_path(method_key)
	path_data = path_data or {}

	missing = [name for name in methods.MethodRegistry.placeholders(template)
			   if path_data.get(name) is None]
	if missing:
		raise errors.PathParameterError(method_key, missing)

	return methods.PLACEHOLDER.sub(lambda m: escape(path_data[m.group(1)]), template)


def resolve(
		region: typing.Union[config.PlatformId, str],
		method_key: str,
		path_data: typing.Mapping[str, typing.Any] = None,
		params: typing.Mapping[str, typing.Any] = None) -> str:
	"""
	Builds the full URL for a method key.

	Args:
		region (PlatformId, str): Platform or cluster the request is routed to.
		method_key (str): Dotted method key, e.g. "SUMMONER.GET_BY_PUUID".
		path_data (dict): Values for the placeholders of the path template.
		params (dict): Query parameters.

	Returns:
		str: The resolved URL.

	Raises:
		RegistryLookupError: The method key is unknown or not a leaf.
		PathParameterError: A placeholder has no value.

	>>> resolve("euw1", "SUMMONER.GET_BY_SUMMONER_NAME", {"summonerName": "Demos"})
	'https://euw1.api.riotgames.com/lol/summoner/v4/summoners/by-name/Demos'
	"""
	url = create_host(region) + create_path(method_key, path_data)
	if params:
		url += "?" + encode_query(params)
	return url


if __name__ == "__main__":
	import doctest
	doctest.testmod()
