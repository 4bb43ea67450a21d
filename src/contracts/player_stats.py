"""
Aggregated player stats returned by the stats lookup.
"""

from pydantic import Field

from src.core.scoring.models import PerformanceIndex

from .common import BaseContract, Platform, Role
from .match import MatchStat
from .summoner import AccountRecord, RankedEntry, RankedLookup, SummonerRecord


class PlayerStatsResult(BaseContract):
    """Everything one /stats lookup produces. Built per request, never cached."""

    platform: Platform
    account: AccountRecord
    summoner: SummonerRecord
    ranked: RankedEntry | None = Field(None, description="Solo/duo entry, if any")
    ranked_lookup: RankedLookup = Field(..., description="How the ranked stage ended")
    recent_matches: list[MatchStat] = Field(
        default_factory=list, description="Most recent first, at most the requested count"
    )
    primary_role: Role = Role.UNKNOWN
    performance_index: PerformanceIndex = Field(default_factory=PerformanceIndex)

    @property
    def display_name(self) -> str:
        return self.account.display_name

    @property
    def wins(self) -> int:
        return sum(1 for m in self.recent_matches if m.win)

    @property
    def losses(self) -> int:
        return len(self.recent_matches) - self.wins
