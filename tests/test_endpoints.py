from unittest.mock import ANY

import pytest

from riotapi.utils.config import PlatformId, region_to_cluster


def sent(limiter):
	payload, meta = limiter.execute.await_args[0]
	return payload["url"], payload["options"], meta


@pytest.mark.asyncio
async def test_account_by_puuid(make_api, limiter):
	await make_api().account.get_by_puuid(PlatformId.EUROPE, "1")

	url, _, meta = sent(limiter)
	assert url == "https://europe.api.riotgames.com/riot/account/v1/accounts/by-puuid/1"
	assert meta == {"id": "europe.account.getByPUUID.1", "priority": 4}


@pytest.mark.asyncio
async def test_account_by_riot_id(make_api, limiter):
	await make_api().account.get_by_riot_id(PlatformId.AMERICAS, "Demos Kratos", "EUW")

	url, _, meta = sent(limiter)
	assert url == "https://americas.api.riotgames.com/riot/account/v1/accounts/by-riot-id/Demos%20Kratos/EUW"
	assert meta == {"id": "americas.account.getByRiotId.Demos Kratos.EUW", "priority": 4}


@pytest.mark.asyncio
async def test_active_shard_uses_default_priority(make_api, limiter):
	await make_api().account.get_active_shard_for_player(PlatformId.EUROPE, "val", "1")

	_, _, meta = sent(limiter)
	assert meta == {"id": "europe.account.getActiveShardForPlayer.val.1"}


@pytest.mark.asyncio
async def test_summoner_by_name(make_api, limiter, summoner_url):
	await make_api().summoner.get_by_summoner_name(PlatformId.EUW1, "Demos")

	url, options, meta = sent(limiter)
	assert url == summoner_url
	assert options["headers"] == {"X-Riot-Token": "1234"}
	assert meta == {"id": "euw1.summoner.getBySummonerName.Demos"}


@pytest.mark.asyncio
async def test_summoner_by_access_token(make_api, limiter):
	await make_api().summoner.get_by_access_token(PlatformId.NA1, "token")

	url, options, _ = sent(limiter)
	assert url == "https://na1.api.riotgames.com/lol/summoner/v4/summoners/me"
	assert options["headers"] == {"Authorization": "Bearer token"}


@pytest.mark.asyncio
async def test_match_ids_with_filters(make_api, limiter):
	cluster = region_to_cluster(PlatformId.EUW1)
	await make_api().match_v5.get_ids_by_puuid(cluster, "abc", {"start": 0, "count": 20})

	url, _, meta = sent(limiter)
	assert url == "https://europe.api.riotgames.com/lol/match/v5/matches/by-puuid/abc/ids?start=0&count=20"
	assert meta == {"id": "europe.matchv5.getIdsByPuuid.abc"}


@pytest.mark.asyncio
async def test_league_entries_page(make_api, limiter):
	await make_api().league.get_all_entries(PlatformId.KR, "RANKED_SOLO_5x5", "GOLD", "I", page=2)

	url, _, _ = sent(limiter)
	assert url == "https://kr.api.riotgames.com/lol/league/v4/entries/RANKED_SOLO_5x5/GOLD/I?page=2"


@pytest.mark.asyncio
async def test_endpoint_results_are_returned(make_api, limiter):
	limiter.execute.return_value = [{"championId": 1}]

	resp = await make_api().champion_mastery.get_all_champions(PlatformId.EUW1, "abc")

	assert resp == [{"championId": 1}]
	limiter.execute.assert_awaited_once_with({"url": ANY, "options": ANY}, {"id": ANY})


@pytest.mark.asyncio
@pytest.mark.parametrize("call, url, job_id", [
	(
		lambda api: api.champion.get_rotations(PlatformId.EUW1),
		"https://euw1.api.riotgames.com/lol/platform/v3/champion-rotations",
		"euw1.champion.getRotations",
	),
	(
		lambda api: api.clash.get_tournament_by_team_id(PlatformId.EUW1, "team1"),
		"https://euw1.api.riotgames.com/lol/clash/v1/tournaments/by-team/team1",
		"euw1.clash.getTournamentByTeamId.team1",
	),
	(
		lambda api: api.league_exp.get_league_entries(PlatformId.NA1, "RANKED_SOLO_5x5", "MASTER", "I"),
		"https://na1.api.riotgames.com/lol/league-exp/v4/entries/RANKED_SOLO_5x5/MASTER/I",
		"na1.leagueExp.getLeagueEntries.RANKED_SOLO_5x5.MASTER.I",
	),
	(
		lambda api: api.lol_status.get_platform_data(PlatformId.KR),
		"https://kr.api.riotgames.com/lol/status/v4/platform-data",
		"kr.lolStatus.getPlatformData",
	),
	(
		lambda api: api.lor_match.get_by_id(PlatformId.EUROPE, "m1"),
		"https://europe.api.riotgames.com/lor/match/v1/matches/m1",
		"europe.lorMatch.getById.m1",
	),
	(
		lambda api: api.lor_ranked.get_master_tier(PlatformId.SEA),
		"https://sea.api.riotgames.com/lor/ranked/v1/leaderboards",
		"sea.lorRanked.getMasterTier",
	),
	(
		lambda api: api.tft_league.get_all_entries(PlatformId.EUW1, "GOLD", "II", page=3),
		"https://euw1.api.riotgames.com/tft/league/v1/entries/GOLD/II?page=3",
		"euw1.tftLeague.getAllEntries.GOLD.II",
	),
	(
		lambda api: api.tft_match.get_match_ids_by_puuid(PlatformId.ASIA, "abc", count=10),
		"https://asia.api.riotgames.com/tft/match/v1/matches/by-puuid/abc/ids?count=10",
		"asia.tftMatch.getMatchIdsByPUUID.abc",
	),
	(
		lambda api: api.tft_summoner.get_by_summoner_name(PlatformId.EUW1, "Demos"),
		"https://euw1.api.riotgames.com/tft/summoner/v1/summoners/by-name/Demos",
		"euw1.tftSummoner.getBySummonerName.Demos",
	),
	(
		lambda api: api.third_party_code.get_by_summoner_id(PlatformId.EUW1, "s1"),
		"https://euw1.api.riotgames.com/lol/platform/v4/third-party-code/by-summoner/s1",
		"euw1.thirdPartyCode.getBySummonerId.s1",
	),
	(
		lambda api: api.val_content.get_content(PlatformId.EU, locale="en-US"),
		"https://eu.api.riotgames.com/val/content/v1/contents?locale=en-US",
		"eu.valContent.getContent",
	),
	(
		lambda api: api.val_match.get_recent_matches_by_queue(PlatformId.NA, "competitive"),
		"https://na.api.riotgames.com/val/match/v1/recent-matches/by-queue/competitive",
		"na.valMatch.getRecentMatchesByQueue.competitive",
	),
])
async def test_endpoint_groups(make_api, limiter, call, url, job_id):
	await call(make_api())

	sent_url, options, meta = sent(limiter)
	assert sent_url == url
	assert options["method"] == "GET"
	assert meta == {"id": job_id}


@pytest.mark.asyncio
async def test_tournament_stub_create_codes(make_api, limiter):
	await make_api().tournament_stub.create_codes(42, 5, {"mapType": "SUMMONERS_RIFT"})

	url, options, meta = sent(limiter)
	assert url == "https://americas.api.riotgames.com/lol/tournament-stub/v4/codes?count=5&tournamentId=42"
	assert options["method"] == "POST"
	assert options["body"] == '{"mapType":"SUMMONERS_RIFT"}'
	assert meta == {"id": "americas.tournamentStub.createCodes.42"}


@pytest.mark.asyncio
async def test_tournament_calls_go_first(make_api, limiter):
	await make_api().tournament.update_by_tournament_code("EUW-CODE", {"allowedSummonerIds": []})

	url, options, meta = sent(limiter)
	assert url == "https://americas.api.riotgames.com/lol/tournament/v4/codes/EUW-CODE"
	assert options["method"] == "PUT"
	assert meta == {"id": "americas.tournament.updateByTournamentCode.EUW-CODE", "priority": 0}
