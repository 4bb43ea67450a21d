"""Unit tests for the /stats embed and error rendering."""

import json
from urllib.parse import parse_qs, urlparse

import discord
import pytest

from src.contracts import (
    AccountRecord,
    MatchStat,
    Platform,
    PlayerStatsResult,
    RankedEntry,
    RankedLookup,
    Role,
    SummonerRecord,
)
from src.contracts.discord_interactions import EmbedColor
from src.core.errors import (
    MalformedRiotIdError,
    PlayerNotFoundError,
    UnsupportedRegionError,
    UpstreamError,
)
from src.core.scoring import PerformanceMetrics, calculate_performance_index
from src.core.views.performance_chart import build_chart_config, build_performance_chart_url
from src.core.views.player_stats_view import (
    describe_lookup_error,
    render_lookup_error_embed,
    render_player_stats_embed,
)


def _result(ranked_lookup: RankedLookup, matches: list[MatchStat]) -> PlayerStatsResult:
    return PlayerStatsResult(
        platform=Platform.EUW1,
        account=AccountRecord(puuid="p-1", game_name="Caps", tag_line="EUW"),
        summoner=SummonerRecord(id="s-1", profile_icon_id=4568, summoner_level=420),
        ranked=ranked_lookup.entry,
        ranked_lookup=ranked_lookup,
        recent_matches=matches,
        primary_role=Role.MID,
        performance_index=calculate_performance_index(matches),
    )


MATCHES = [
    MatchStat(
        match_id="EUW1_1",
        champion_name="Sylas",
        role=Role.MID,
        kills=8,
        deaths=0,
        assists=6,
        cs_per_min=7.4,
        kill_participation=63.6,
        kda="Perfect",
        win=True,
        game_duration_minutes=27,
    ),
    MatchStat(
        match_id="EUW1_2",
        champion_name="LeBlanc",
        role=Role.MID,
        kills=3,
        deaths=4,
        assists=2,
        cs_per_min=8.1,
        kill_participation=41.7,
        kda=1.25,
        win=False,
        game_duration_minutes=31,
    ),
]


def test_stats_embed_content() -> None:
    entry = RankedEntry(tier="GRANDMASTER", rank="I", league_points=612, wins=120, losses=95)
    embed = render_player_stats_embed(_result(RankedLookup.found(entry), MATCHES))

    assert embed.title == "📊 Caps#EUW"
    assert embed.color.value == EmbedColor.STATS
    assert "EUW1" in embed.description
    assert "(europe)" in embed.description
    assert embed.thumbnail.url.endswith("/profileicon/4568.png")

    fields = {f.name: f.value for f in embed.fields}
    assert "Grandmaster" in fields["🏆 Solo/Duo"]
    assert "612 LP" in fields["🏆 Solo/Duo"]
    games = fields["🕹️ Last 2 games (1W 1L)"]
    assert "**Sylas** (Mid) 8/0/6 · KDA Perfect" in games
    assert "KDA 1.25" in games
    assert embed.image.url.startswith("https://quickchart.io/chart?c=")


@pytest.mark.parametrize(
    ("lookup", "label"),
    [
        (RankedLookup.absent(), "Unranked"),
        (RankedLookup.skipped(), "Unranked"),
        (RankedLookup.failed(UpstreamError("HTTP 500", status_code=500)), "Unavailable"),
    ],
)
def test_ranked_field_without_entry(lookup: RankedLookup, label: str) -> None:
    embed = render_player_stats_embed(_result(lookup, MATCHES))
    assert embed.fields[0].value == label


def test_no_recent_matches() -> None:
    embed = render_player_stats_embed(_result(RankedLookup.absent(), []))
    fields = {f.name: f.value for f in embed.fields}
    assert fields["🕹️ Recent games"] == "No recent matches found"
    assert embed.image.url is None


def test_field_values_respect_discord_limit() -> None:
    many = [MATCHES[1].model_copy(update={"champion_name": "X" * 200}) for _ in range(10)]
    embed = render_player_stats_embed(_result(RankedLookup.absent(), many))
    assert all(len(f.value) <= 1024 for f in embed.fields)


@pytest.mark.parametrize(
    ("error", "fragment", "correctable"),
    [
        (MalformedRiotIdError("Faker"), "GameName#TAG", True),
        (UnsupportedRegionError("mars1"), "mars1", True),
        (PlayerNotFoundError("Nobody", "000"), "Nobody#000", True),
        (UpstreamError("HTTP 429", status_code=429, retry_after=7), "in 7s", False),
        (UpstreamError("reset"), "try again later", False),
        (RuntimeError("boom"), "Something went wrong", False),
    ],
)
def test_describe_lookup_error(error: Exception, fragment: str, correctable: bool) -> None:
    message, user_correctable = describe_lookup_error(error)
    assert fragment in message
    assert user_correctable is correctable


def test_lookup_error_embed() -> None:
    embed = render_lookup_error_embed(PlayerNotFoundError("Nobody", "000"))
    assert isinstance(embed, discord.Embed)
    assert embed.color.value == EmbedColor.ERROR
    assert "Fix the input" in embed.description


def test_chart_url_encodes_metrics_in_label_order() -> None:
    metrics = PerformanceMetrics(
        aggression=90, farming=80, vision=70, consistency=60, teamfighting=50, survivability=40
    )
    config = build_chart_config(metrics)
    assert config["type"] == "radar"
    assert config["data"]["datasets"][0]["data"] == [90, 80, 70, 60, 50, 40]

    query = parse_qs(urlparse(build_performance_chart_url(metrics)).query)
    assert json.loads(query["c"][0]) == config
