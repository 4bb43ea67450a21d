"""Contract models for data validation."""

from .common import PERFECT_KDA, SOLO_QUEUE_TYPE, Platform, Role, RoutingCluster
from .match import MatchStat
from .player_stats import PlayerStatsResult
from .summoner import (
    AccountRecord,
    PlayerIdentity,
    RankedEntry,
    RankedLookup,
    SummonerRecord,
)

__all__ = [
    "PERFECT_KDA",
    "SOLO_QUEUE_TYPE",
    "Platform",
    "Role",
    "RoutingCluster",
    "MatchStat",
    "PlayerStatsResult",
    "AccountRecord",
    "PlayerIdentity",
    "RankedEntry",
    "RankedLookup",
    "SummonerRecord",
]
