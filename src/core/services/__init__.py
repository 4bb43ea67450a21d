"""Service layer implementing business logic.

Services connect ports (interfaces) with adapters (implementations),
providing high-level business operations to the application layer.
"""

from src.core.services.match_history_service import (
    SEQUENTIAL_FETCH_POLICY,
    FetchPolicy,
    MatchHistoryService,
)
from src.core.services.match_stat_extractor import extract_match_stat
from src.core.services.player_stats_service import PlayerStatsService

__all__ = [
    "SEQUENTIAL_FETCH_POLICY",
    "FetchPolicy",
    "MatchHistoryService",
    "extract_match_stat",
    "PlayerStatsService",
]
