import typing

import riotapi.utils.config as configuration


class Endpoint:
	"""
	A group of methods sharing one API namespace.

	Each method just supplies the method key, the path data and a job id
	of the form "{region}.{name}.{method}.{args}" to `RiotAPI.request`.
	"""

	name = None  # type: str

	__slots__ = (
		"api",  # type: riotapi.client.RiotAPI
	)

	def __init__(self, api):
		self.api = api

	def __repr__(self):
		return f"<{self.__class__.__name__}>"

	def job_id(self, region: typing.Union[configuration.PlatformId, str], method: str, *args) -> str:
		parts = [configuration.region_value(region), self.name, method]
		parts.extend(str(arg) for arg in args)
		return ".".join(parts)
