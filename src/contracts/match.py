"""
Per-match player statistics derived from Match-V5 payloads.
"""

from typing import Literal

from pydantic import Field

from .common import BaseContract, Role


class MatchStat(BaseContract):
    """One player's line for one match."""

    match_id: str | None = Field(None, description="Match-V5 id (e.g. NA1_123)")
    champion_name: str = Field(..., description="Champion played")
    role: Role = Field(Role.UNKNOWN, description="Lane derived from teamPosition")
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    cs: int = Field(0, ge=0, description="Lane minions + neutral monsters")
    cs_per_min: float = Field(0.0, ge=0)
    vision_score: int = Field(0, ge=0)
    vision_per_min: float = Field(0.0, ge=0)
    gold_earned: int = Field(0, ge=0)
    damage_dealt: int = Field(0, ge=0, description="Damage dealt to champions")
    kill_participation: float = Field(0.0, ge=0, description="Percent of team kills")
    kda: float | Literal["Perfect"] = Field(..., description="(K+A)/D or 'Perfect' when D=0")
    win: bool
    game_duration_minutes: int = Field(0, ge=0)

    @property
    def is_perfect_kda(self) -> bool:
        return self.kda == "Perfect"

    @property
    def kda_line(self) -> str:
        return f"{self.kills}/{self.deaths}/{self.assists}"
