"""Port interfaces for hexagonal architecture.

These ports define the contracts between the core domain and external adapters.
All external dependencies must implement these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from src.contracts.common import Platform
from src.contracts.summoner import AccountRecord, RankedEntry, SummonerRecord
from src.core.ports.match_history_port import IMatchHistoryService

__all__ = [
    "RiotAPIPort",
    "IMatchHistoryService",
]


class RiotAPIPort(ABC):
    """Port for Riot Games API operations.

    Account and match calls are routed by cluster, summoner and league calls
    by platform; implementations derive both from the platform argument.
    """

    @abstractmethod
    async def get_account_by_riot_id(self, riot_id: str, platform: Platform | str) -> AccountRecord:
        """Resolve ``Name#Tag`` via Account-V1."""
        pass

    @abstractmethod
    async def get_summoner_by_puuid(self, puuid: str, platform: Platform | str) -> SummonerRecord:
        """Get summoner profile via Summoner-V4."""
        pass

    @abstractmethod
    async def get_ranked_solo_entry(
        self, summoner_id: str, platform: Platform | str
    ) -> RankedEntry | None:
        """Get the solo/duo league entry via League-V4, None if unranked."""
        pass

    @abstractmethod
    async def get_match_ids(self, puuid: str, platform: Platform | str, count: int = 5) -> list[str]:
        """Get recent match IDs (newest first) via Match-V5."""
        pass

    @abstractmethod
    async def get_match_details(self, match_id: str, platform: Platform | str) -> dict[str, Any]:
        """Get full match payload via Match-V5."""
        pass
