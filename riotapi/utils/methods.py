import types
import typing
import re

import riotapi.errors as errors


HOST = "https://{platformId}.api.riotgames.com"

# Method key namespaces and the path templates they resolve to.
METHODS = {
	"ACCOUNT": {
		"GET_BY_PUUID": "/riot/account/v1/accounts/by-puuid/{puuid}",
		"GET_BY_RIOT_ID": "/riot/account/v1/accounts/by-riot-id/{gameName}/{tagLine}",
		"GET_ACTIVE_SHARD_FOR_PLAYER": "/riot/account/v1/active-shards/by-game/{game}/by-puuid/{puuid}",
	},
	"CHAMPION_MASTERY": {
		"GET_ALL_CHAMPIONS": "/lol/champion-mastery/v4/champion-masteries/by-summoner/{summonerId}",
		"GET_CHAMPION_MASTERY":
			"/lol/champion-mastery/v4/champion-masteries/by-summoner/{summonerId}/by-champion/{championId}",
		"GET_CHAMPION_MASTERY_SCORE": "/lol/champion-mastery/v4/scores/by-summoner/{summonerId}",
	},
	"CHAMPION": {
		"GET_CHAMPION_ROTATIONS": "/lol/platform/v3/champion-rotations",
	},
	"CLASH": {
		"GET_PLAYERS_BY_SUMMONER": "/lol/clash/v1/players/by-summoner/{summonerId}",
		"GET_TEAM": "/lol/clash/v1/teams/{teamId}",
		"GET_TOURNAMENTS": "/lol/clash/v1/tournaments",
		"GET_TOURNAMENT": "/lol/clash/v1/tournaments/{tournamentId}",
		"GET_TOURNAMENT_TEAM": "/lol/clash/v1/tournaments/by-team/{teamId}",
	},
	"LEAGUE_EXP": {
		"GET_LEAGUE_ENTRIES": "/lol/league-exp/v4/entries/{queue}/{tier}/{division}",
	},
	"LEAGUE": {
		"GET_CHALLENGER_BY_QUEUE": "/lol/league/v4/challengerleagues/by-queue/{queue}",
		"GET_ENTRIES_BY_SUMMONER": "/lol/league/v4/entries/by-summoner/{summonerId}",
		"GET_ALL_ENTRIES": "/lol/league/v4/entries/{queue}/{tier}/{division}",
		"GET_GRANDMASTER_BY_QUEUE": "/lol/league/v4/grandmasterleagues/by-queue/{queue}",
		"GET_LEAGUE_BY_ID": "/lol/league/v4/leagues/{leagueId}",
		"GET_MASTER_BY_QUEUE": "/lol/league/v4/masterleagues/by-queue/{queue}",
	},
	"LOL_STATUS": {
		"GET_PLATFORM_DATA": "/lol/status/v4/platform-data",
	},
	"LOR_MATCH": {
		"GET_MATCH_IDS_BY_PUUID": "/lor/match/v1/matches/by-puuid/{puuid}/ids",
		"GET_MATCH_BY_ID": "/lor/match/v1/matches/{matchId}",
	},
	"LOR_RANKED": {
		"GET_MASTER_TIER": "/lor/ranked/v1/leaderboards",
	},
	"MATCH_V5": {
		"GET_IDS_BY_PUUID": "/lol/match/v5/matches/by-puuid/{puuid}/ids",
		"GET_MATCH_BY_ID": "/lol/match/v5/matches/{matchId}",
		"GET_MATCH_TIMELINE_BY_ID": "/lol/match/v5/matches/{matchId}/timeline",
	},
	"SPECTATOR": {
		"GET_GAME_BY_SUMMONER_ID": "/lol/spectator/v4/active-games/by-summoner/{summonerId}",
		"GET_FEATURED_GAMES": "/lol/spectator/v4/featured-games",
	},
	"SUMMONER": {
		"GET_BY_ACCOUNT_ID": "/lol/summoner/v4/summoners/by-account/{accountId}",
		"GET_BY_SUMMONER_NAME": "/lol/summoner/v4/summoners/by-name/{summonerName}",
		"GET_BY_PUUID": "/lol/summoner/v4/summoners/by-puuid/{puuid}",
		"GET_BY_SUMMONER_ID": "/lol/summoner/v4/summoners/{summonerId}",
		"GET_BY_ACCESS_TOKEN": "/lol/summoner/v4/summoners/me",
	},
	"TFT_LEAGUE": {
		"GET_CHALLENGER": "/tft/league/v1/challenger",
		"GET_ENTRIES_BY_SUMMONER": "/tft/league/v1/entries/by-summoner/{summonerId}",
		"GET_ALL_ENTRIES": "/tft/league/v1/entries/{tier}/{division}",
		"GET_GRANDMASTER": "/tft/league/v1/grandmaster",
		"GET_LEAGUE_BY_ID": "/tft/league/v1/leagues/{leagueId}",
		"GET_MASTER": "/tft/league/v1/master",
	},
	"TFT_MATCH": {
		"GET_MATCH_IDS_BY_PUUID": "/tft/match/v1/matches/by-puuid/{puuid}/ids",
		"GET_MATCH_BY_ID": "/tft/match/v1/matches/{matchId}",
	},
	"TFT_SUMMONER": {
		"GET_BY_ACCOUNT_ID": "/tft/summoner/v1/summoners/by-account/{accountId}",
		"GET_BY_SUMMONER_NAME": "/tft/summoner/v1/summoners/by-name/{summonerName}",
		"GET_BY_PUUID": "/tft/summoner/v1/summoners/by-puuid/{puuid}",
		"GET_BY_SUMMONER_ID": "/tft/summoner/v1/summoners/{summonerId}",
	},
	"THIRD_PARTY_CODE": {
		"GET_BY_SUMMONER_ID": "/lol/platform/v4/third-party-code/by-summoner/{summonerId}",
	},
	"TOURNAMENT_STUB": {
		"POST_CREATE_CODES": "/lol/tournament-stub/v4/codes",
		"GET_LOBBY_EVENTS_BY_TOURNAMENT_CODE": "/lol/tournament-stub/v4/lobby-events/by-code/{tournamentCode}",
		"POST_CREATE_PROVIDER": "/lol/tournament-stub/v4/providers",
		"POST_CREATE_TOURNAMENT": "/lol/tournament-stub/v4/tournaments",
	},
	"TOURNAMENT": {
		"POST_CREATE_CODES": "/lol/tournament/v4/codes",
		"GET_TOURNAMENT_BY_CODE": "/lol/tournament/v4/codes/{tournamentCode}",
		"PUT_TOURNAMENT_CODE": "/lol/tournament/v4/codes/{tournamentCode}",
		"GET_LOBBY_EVENTS_BY_TOURNAMENT_CODE": "/lol/tournament/v4/lobby-events/by-code/{tournamentCode}",
		"POST_CREATE_PROVIDER": "/lol/tournament/v4/providers",
		"POST_CREATE_TOURNAMENT": "/lol/tournament/v4/tournaments",
	},
	"VAL_CONTENT": {
		"GET_CONTENT": "/val/content/v1/contents",
	},
	"VAL_MATCH": {
		"GET_MATCH_BY_ID": "/val/match/v1/matches/{matchId}",
		"GET_MATCHLIST_BY_PUUID": "/val/match/v1/matchlists/by-puuid/{puuid}",
		"GET_RECENT_MATCHES_BY_QUEUE": "/val/match/v1/recent-matches/by-queue/{queue}",
	},
}

PLACEHOLDER = re.compile(r"{(\w+)}")


def flatten(tree: dict, prefix: str = "") -> typing.Tuple[typing.Dict[str, str], typing.Set[str]]:
	"""
	Flattens a nested registry into dotted keys.

	Returns:
		(dict, set)
			The leaf templates by dotted key, and every dotted key that names a namespace.
	"""
	leaves = {}
	namespaces = set()
	for name, value in tree.items():
		key = f"{prefix}{name}"
		if isinstance(value, dict):
			namespaces.add(key)
			sub_leaves, sub_namespaces = flatten(value, prefix=f"{key}.")
			leaves.update(sub_leaves)
			namespaces.update(sub_namespaces)
		else:
			leaves[key] = value
	return leaves, namespaces


def _key_space(tree: dict, prefix: str = "") -> types.SimpleNamespace:
	attrs = {}
	for name, value in tree.items():
		if isinstance(value, dict):
			attrs[name] = _key_space(value, prefix=f"{prefix}{name}.")
		else:
			attrs[name] = f"{prefix}{name}"
	return types.SimpleNamespace(**attrs)


class MethodRegistry:
	"""Lookup table from dotted method keys to path templates."""

	__slots__ = (
		"paths",  # type: dict
		"namespaces",  # type: set
		"patterns",  # type: list
	)

	def __init__(self, tree: dict):
		self.paths, self.namespaces = flatten(tree)

		# Literal templates come first, so "/summoners/me" wins over "/summoners/{summonerId}".
		self.patterns = []
		for method_key, template in sorted(self.paths.items(), key=lambda kv: len(PLACEHOLDER.findall(kv[1]))):
			regex = "^" + PLACEHOLDER.sub("[^/]+", re.escape(template).replace(r"\{", "{").replace(r"\}", "}")) + "$"
			self.patterns.append((re.compile(regex), method_key))

	def __contains__(self, method_key: str) -> bool:
		return method_key in self.paths

	def __repr__(self):
		return f"<MethodRegistry:{len(self.paths)}>"

	def get_path(self, method_key: str) -> str:
		"""
		Gets the path template for a method key.

		Raises:
			RegistryLookupError: If the key is unknown or names a namespace.
		"""
		try:
			return self.paths[method_key]
		except KeyError:
			pass

		if method_key in self.namespaces:
			raise errors.RegistryLookupError(method_key, reason="is not a leaf path template")
		raise errors.RegistryLookupError(method_key)

	@staticmethod
	def placeholders(template: str) -> typing.List[str]:
		return PLACEHOLDER.findall(template)

	def match(self, path: str) -> typing.Optional[str]:
		"""Finds the method key whose template produced a concrete path."""
		path = path.split("?", 1)[0]
		for regex, method_key in self.patterns:
			if regex.match(path):
				return method_key
		return None


registry = MethodRegistry(METHODS)

METHOD_KEY = _key_space(METHODS)


def get_path(method_key: str) -> str:
	return registry.get_path(method_key)
