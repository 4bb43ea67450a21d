"""Unit tests for per-match stat extraction.

Pure domain logic, payloads built by hand.
"""

from src.contracts.common import PERFECT_KDA, Role
from src.core.services.match_stat_extractor import (
    calculate_kda,
    extract_match_stat,
    role_for_position,
    round_to,
)
from tests.factories import make_match, make_participant

PUUID = "subject-puuid"


def _five_v_five(**subject_overrides: object) -> list[dict]:
    subject = make_participant(PUUID, team_id=100, **subject_overrides)
    allies = [make_participant(f"ally-{i}", team_id=100, kills=2) for i in range(4)]
    enemies = [make_participant(f"enemy-{i}", team_id=200, kills=7) for i in range(5)]
    return [subject, *allies, *enemies]


def test_extracts_core_fields() -> None:
    participants = _five_v_five(
        championName="Orianna",
        teamPosition="MIDDLE",
        kills=7,
        deaths=2,
        assists=5,
        totalMinionsKilled=220,
        neutralMinionsKilled=20,
        visionScore=30,
        goldEarned=13250,
        totalDamageDealtToChampions=28100,
        win=True,
    )
    stat = extract_match_stat(make_match("NA1_1", participants, duration_seconds=1800), PUUID)

    assert stat is not None
    assert stat.match_id == "NA1_1"
    assert stat.champion_name == "Orianna"
    assert stat.role is Role.MID
    assert stat.kda_line == "7/2/5"
    assert stat.kda == 6.0
    assert stat.cs == 240
    assert stat.cs_per_min == 8.0
    assert stat.vision_per_min == 1.0
    assert stat.gold_earned == 13250
    assert stat.damage_dealt == 28100
    assert stat.win is True
    assert stat.game_duration_minutes == 30


def test_kill_participation_uses_own_team_kills() -> None:
    # team kills: 7 (subject) + 4 * 2 (allies) = 15; enemies do not count
    participants = _five_v_five(kills=7, assists=5)
    stat = extract_match_stat(make_match("NA1_2", participants), PUUID)
    assert stat is not None
    assert stat.kill_participation == 80.0


def test_zero_team_kills_gives_zero_participation() -> None:
    participants = [make_participant(PUUID, assists=3), make_participant("enemy", team_id=200, kills=4)]
    stat = extract_match_stat(make_match("NA1_3", participants), PUUID)
    assert stat is not None
    assert stat.kill_participation == 0.0


def test_zero_deaths_is_perfect_kda() -> None:
    assert calculate_kda(3, 0, 4) == PERFECT_KDA
    stat = extract_match_stat(make_match("NA1_4", _five_v_five(kills=3, deaths=0)), PUUID)
    assert stat is not None
    assert stat.is_perfect_kda


def test_kda_rounds_half_up() -> None:
    assert calculate_kda(1, 8, 0) == 0.13  # 0.125
    assert round_to(2.675, 2) == 2.68


def test_zero_duration_yields_zero_rates() -> None:
    participants = _five_v_five(totalMinionsKilled=10, visionScore=4)
    stat = extract_match_stat(make_match("NA1_5", participants, duration_seconds=0), PUUID)
    assert stat is not None
    assert stat.cs_per_min == 0.0
    assert stat.vision_per_min == 0.0
    assert stat.game_duration_minutes == 0


def test_duration_minutes_truncates() -> None:
    stat = extract_match_stat(make_match("NA1_6", _five_v_five(), duration_seconds=1799), PUUID)
    assert stat is not None
    assert stat.game_duration_minutes == 29


def test_player_absent_returns_none() -> None:
    assert extract_match_stat(make_match("NA1_7", _five_v_five()), "someone-else") is None


def test_unknown_positions_map_to_unknown() -> None:
    assert role_for_position("BOTTOM") is Role.ADC
    assert role_for_position("utility") is Role.SUPPORT
    assert role_for_position("") is Role.UNKNOWN
    assert role_for_position("Invalid") is Role.UNKNOWN
    assert role_for_position(None) is Role.UNKNOWN
