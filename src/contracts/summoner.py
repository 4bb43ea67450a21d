"""
Summoner and account-related data contracts.

Records are validated straight from Riot payloads (camelCase aliases);
unknown upstream fields are dropped so only the narrow internal shape remains.
"""

from typing import Literal

from pydantic import ConfigDict, Field

from src.core.errors import MalformedRiotIdError

from .common import BaseContract


class RiotRecord(BaseContract):
    """Base for records parsed from Riot API payloads."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class PlayerIdentity(BaseContract):
    """Riot ID split into game name and tag line."""

    game_name: str = Field(..., min_length=1)
    tag_line: str = Field(..., min_length=1)

    @classmethod
    def parse(cls, riot_id: str) -> "PlayerIdentity":
        """Parse ``Name#Tag``; raises MalformedRiotIdError before any network call."""
        if not isinstance(riot_id, str) or "#" not in riot_id:
            raise MalformedRiotIdError(str(riot_id))
        name, tag = riot_id.split("#", 1)
        name = name.strip()
        tag = tag.strip()
        if not name or not tag:
            raise MalformedRiotIdError(riot_id)
        return cls(game_name=name, tag_line=tag)

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


class AccountRecord(RiotRecord):
    """Riot account information (Account-V1)."""

    puuid: str = Field(..., description="Player's PUUID")
    game_name: str = Field(..., alias="gameName", description="Game name")
    tag_line: str = Field(..., alias="tagLine", description="Tag line")

    @property
    def display_name(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


class SummonerRecord(RiotRecord):
    """Summoner profile (Summoner-V4).

    ``id`` is missing when the account has no summoner on the queried platform;
    ranked lookup is skipped in that case.
    """

    id: str | None = Field(None, description="Encrypted summoner ID")
    profile_icon_id: int = Field(0, alias="profileIconId")
    summoner_level: int = Field(0, alias="summonerLevel")


class RankedEntry(RiotRecord):
    """Solo/duo league entry (League-V4)."""

    tier: str
    rank: str
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = 0
    losses: int = 0

    @property
    def win_rate(self) -> float:
        """Win rate percentage with one decimal."""
        total_games = self.wins + self.losses
        if total_games == 0:
            return 0.0
        return round(self.wins / total_games * 100, 1)

    @property
    def full_rank(self) -> str:
        if self.tier in ("MASTER", "GRANDMASTER", "CHALLENGER"):
            return self.tier.title()
        return f"{self.tier.title()} {self.rank}"


class RankedLookup(BaseContract):
    """Outcome of the ranked stage.

    ``failed`` records an upstream error that was swallowed; ``skipped`` means
    the summoner had no id so no request was made.
    """

    status: Literal["found", "absent", "skipped", "failed"]
    entry: RankedEntry | None = None
    error: str | None = None
    error_status_code: int | None = None

    @classmethod
    def found(cls, entry: RankedEntry) -> "RankedLookup":
        return cls(status="found", entry=entry)

    @classmethod
    def absent(cls) -> "RankedLookup":
        return cls(status="absent")

    @classmethod
    def skipped(cls) -> "RankedLookup":
        return cls(status="skipped")

    @classmethod
    def failed(cls, error: Exception) -> "RankedLookup":
        return cls(
            status="failed",
            error=str(error),
            error_status_code=getattr(error, "status_code", None),
        )
