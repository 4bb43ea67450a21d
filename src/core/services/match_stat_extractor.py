"""Per-match stat extraction.

Turns one Match-V5 payload into the subject player's MatchStat. Pure function,
no I/O; a player missing from the payload yields None rather than an error.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Any, Final, Mapping

from src.contracts.common import PERFECT_KDA, Role
from src.contracts.match import MatchStat

logger = logging.getLogger(__name__)

ROLE_BY_POSITION: Final[Mapping[str, Role]] = MappingProxyType(
    {
        "TOP": Role.TOP,
        "JUNGLE": Role.JUNGLE,
        "MIDDLE": Role.MID,
        "BOTTOM": Role.ADC,
        "UTILITY": Role.SUPPORT,
    }
)


def round_to(value: float, places: int) -> float:
    """Fixed-point rounding (half away from zero), like toFixed-style display."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def role_for_position(position: Any) -> Role:
    if not isinstance(position, str):
        return Role.UNKNOWN
    return ROLE_BY_POSITION.get(position.upper(), Role.UNKNOWN)


def _int(participant: dict[str, Any], key: str) -> int:
    try:
        return int(participant.get(key) or 0)
    except (TypeError, ValueError):
        return 0


def _find_participant(participants: list[Any], puuid: str) -> dict[str, Any] | None:
    for participant in participants:
        if isinstance(participant, dict) and participant.get("puuid") == puuid:
            return participant
    return None


def calculate_kill_participation(participant: dict[str, Any], participants: list[Any]) -> float:
    """Percent of the team's kills the player took part in; 0 when the team has none."""
    team_id = participant.get("teamId")
    team_kills = sum(
        _int(p, "kills")
        for p in participants
        if isinstance(p, dict) and p.get("teamId") == team_id
    )
    if team_kills == 0:
        return 0.0
    contribution = _int(participant, "kills") + _int(participant, "assists")
    return round_to(contribution / team_kills * 100, 1)


def calculate_kda(kills: int, deaths: int, assists: int) -> float | str:
    if deaths == 0:
        return PERFECT_KDA
    return round_to((kills + assists) / deaths, 2)


def extract_match_stat(match: dict[str, Any], puuid: str) -> MatchStat | None:
    """Extract ``puuid``'s stats from a full match payload."""
    info = match.get("info") or {}
    participants = info.get("participants") or []
    participant = _find_participant(participants, puuid)
    if participant is None:
        match_id = (match.get("metadata") or {}).get("matchId")
        logger.debug(f"Player {puuid[:8]}... not found in match {match_id}")
        return None

    duration_seconds = _int(info, "gameDuration")
    minutes = duration_seconds / 60

    kills = _int(participant, "kills")
    deaths = _int(participant, "deaths")
    assists = _int(participant, "assists")
    cs = _int(participant, "totalMinionsKilled") + _int(participant, "neutralMinionsKilled")
    vision_score = _int(participant, "visionScore")

    return MatchStat(
        match_id=(match.get("metadata") or {}).get("matchId"),
        champion_name=str(participant.get("championName") or "Unknown"),
        role=role_for_position(participant.get("teamPosition")),
        kills=kills,
        deaths=deaths,
        assists=assists,
        cs=cs,
        cs_per_min=round_to(cs / minutes, 1) if minutes else 0.0,
        vision_score=vision_score,
        vision_per_min=round_to(vision_score / minutes, 1) if minutes else 0.0,
        gold_earned=_int(participant, "goldEarned"),
        damage_dealt=_int(participant, "totalDamageDealtToChampions"),
        kill_participation=calculate_kill_participation(participant, participants),
        kda=calculate_kda(kills, deaths, assists),
        win=bool(participant.get("win")),
        game_duration_minutes=int(minutes),
    )
