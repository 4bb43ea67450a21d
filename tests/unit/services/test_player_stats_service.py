"""Unit tests for the /stats aggregation pipeline.

Uses an in-memory RiotAPIPort that records every call, so tests can assert
which endpoints were hit and in what order.
"""

from typing import Any

import pytest

from src.contracts import AccountRecord, Platform, RankedEntry, Role, SummonerRecord
from src.core.errors import (
    MalformedRiotIdError,
    PlayerNotFoundError,
    UnsupportedRegionError,
    UpstreamError,
)
from src.core.ports import RiotAPIPort
from src.core.routing import routing_cluster_for
from src.core.services.player_stats_service import PlayerStatsService
from tests.factories import make_match, make_participant

PUUID = "faker-puuid"


class FakeRiotAPI(RiotAPIPort):
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.summoner = SummonerRecord(id="s-1", profile_icon_id=6, summoner_level=700)
        self.ranked: RankedEntry | None = RankedEntry(
            tier="CHALLENGER", rank="I", league_points=1500, wins=300, losses=200
        )
        self.ranked_error: Exception | None = None
        self.match_ids_error: Exception | None = None
        self.matches: dict[str, dict[str, Any]] = {
            f"KR_{i}": make_match(
                f"KR_{i}",
                [
                    make_participant(
                        PUUID,
                        kills=5,
                        deaths=1,
                        assists=5,
                        teamPosition="JUNGLE" if i == 2 else "MIDDLE",
                        win=i != 3,
                    ),
                    make_participant("ally", kills=5),
                ],
            )
            for i in range(1, 4)
        }

    async def get_account_by_riot_id(self, riot_id: str, platform: Platform | str) -> AccountRecord:
        self.calls.append(("account", routing_cluster_for(platform).value))
        name, tag = riot_id.split("#", 1)
        if name == "Nobody":
            raise PlayerNotFoundError(name, tag)
        return AccountRecord(puuid=PUUID, game_name=name, tag_line=tag)

    async def get_summoner_by_puuid(self, puuid: str, platform: Platform | str) -> SummonerRecord:
        self.calls.append(("summoner", Platform(platform).value))
        return self.summoner

    async def get_ranked_solo_entry(self, summoner_id: str, platform: Platform | str) -> RankedEntry | None:
        self.calls.append(("ranked", Platform(platform).value))
        if self.ranked_error:
            raise self.ranked_error
        return self.ranked

    async def get_match_ids(self, puuid: str, platform: Platform | str, count: int = 5) -> list[str]:
        self.calls.append(("match_ids", routing_cluster_for(platform).value))
        if self.match_ids_error:
            raise self.match_ids_error
        return list(self.matches)[:count]

    async def get_match_details(self, match_id: str, platform: Platform | str) -> dict[str, Any]:
        self.calls.append(("match", routing_cluster_for(platform).value))
        return self.matches[match_id]


@pytest.fixture
def riot_api() -> FakeRiotAPI:
    return FakeRiotAPI()


@pytest.fixture
def service(riot_api: FakeRiotAPI) -> PlayerStatsService:
    return PlayerStatsService(riot_api, match_count=5)


@pytest.mark.asyncio
async def test_full_lookup(service: PlayerStatsService, riot_api: FakeRiotAPI) -> None:
    result = await service.get_player_stats("Faker#KR1", "kr")

    assert result.display_name == "Faker#KR1"
    assert result.platform is Platform.KR
    assert result.ranked is not None and result.ranked.tier == "CHALLENGER"
    assert result.ranked_lookup.status == "found"
    assert [m.match_id for m in result.recent_matches] == ["KR_1", "KR_2", "KR_3"]
    assert result.primary_role is Role.MID
    assert (result.wins, result.losses) == (2, 1)
    assert result.performance_index.metrics.consistency == 67
    assert [name for name, _ in riot_api.calls] == [
        "account",
        "summoner",
        "ranked",
        "match_ids",
        "match",
        "match",
        "match",
    ]


@pytest.mark.asyncio
async def test_cluster_and_platform_are_not_interchangeable(
    service: PlayerStatsService, riot_api: FakeRiotAPI
) -> None:
    await service.get_player_stats("Faker#KR1", "na1")

    hosts = dict(riot_api.calls)
    assert hosts["account"] == "americas"
    assert hosts["match_ids"] == "americas"
    assert hosts["match"] == "americas"
    assert hosts["summoner"] == "na1"
    assert hosts["ranked"] == "na1"


@pytest.mark.asyncio
async def test_missing_summoner_id_skips_ranked(
    service: PlayerStatsService, riot_api: FakeRiotAPI
) -> None:
    riot_api.summoner = SummonerRecord(profile_icon_id=1, summoner_level=30)

    result = await service.get_player_stats("Faker#KR1", "kr")

    assert result.ranked is None
    assert result.ranked_lookup.status == "skipped"
    assert "ranked" not in [name for name, _ in riot_api.calls]


@pytest.mark.asyncio
async def test_unranked_player(service: PlayerStatsService, riot_api: FakeRiotAPI) -> None:
    riot_api.ranked = None
    result = await service.get_player_stats("Faker#KR1", "kr")
    assert result.ranked is None
    assert result.ranked_lookup.status == "absent"


@pytest.mark.asyncio
async def test_ranked_failure_is_recorded_not_raised(
    service: PlayerStatsService, riot_api: FakeRiotAPI
) -> None:
    riot_api.ranked_error = UpstreamError("HTTP 503", status_code=503)

    result = await service.get_player_stats("Faker#KR1", "kr")

    assert result.ranked is None
    assert result.ranked_lookup.status == "failed"
    assert result.ranked_lookup.error_status_code == 503
    assert len(result.recent_matches) == 3


@pytest.mark.asyncio
async def test_match_id_transport_error_propagates(
    service: PlayerStatsService, riot_api: FakeRiotAPI
) -> None:
    riot_api.match_ids_error = UpstreamError("Connection reset")

    with pytest.raises(UpstreamError) as exc_info:
        await service.get_player_stats("Faker#KR1", "kr")

    assert exc_info.value.is_transport_error
    assert "match" not in [name for name, _ in riot_api.calls]


@pytest.mark.asyncio
async def test_unknown_player_propagates(service: PlayerStatsService, riot_api: FakeRiotAPI) -> None:
    with pytest.raises(PlayerNotFoundError):
        await service.get_player_stats("Nobody#000", "kr")
    assert [name for name, _ in riot_api.calls] == ["account"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("riot_id", "platform", "error"),
    [
        ("Faker", "kr", MalformedRiotIdError),
        ("Faker#", "kr", MalformedRiotIdError),
        ("Faker#KR1", "mars1", UnsupportedRegionError),
    ],
)
async def test_invalid_input_makes_no_requests(
    service: PlayerStatsService, riot_api: FakeRiotAPI, riot_id: str, platform: str, error: type
) -> None:
    with pytest.raises(error):
        await service.get_player_stats(riot_id, platform)
    assert riot_api.calls == []


@pytest.mark.asyncio
async def test_default_platform_applies(riot_api: FakeRiotAPI) -> None:
    service = PlayerStatsService(riot_api, default_platform="EUW1")
    result = await service.get_player_stats("Faker#KR1")
    assert result.platform is Platform.EUW1
    assert dict(riot_api.calls)["account"] == "europe"


@pytest.mark.asyncio
async def test_match_count_limits_history(riot_api: FakeRiotAPI) -> None:
    service = PlayerStatsService(riot_api, match_count=2)
    result = await service.get_player_stats("Faker#KR1", "kr")
    assert len(result.recent_matches) == 2


@pytest.mark.asyncio
async def test_matches_without_player_are_dropped(
    service: PlayerStatsService, riot_api: FakeRiotAPI
) -> None:
    riot_api.matches["KR_2"] = make_match("KR_2", [make_participant("someone-else")])
    result = await service.get_player_stats("Faker#KR1", "kr")
    assert [m.match_id for m in result.recent_matches] == ["KR_1", "KR_3"]
