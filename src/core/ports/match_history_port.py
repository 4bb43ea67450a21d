"""Port interface for match history retrieval.

Abstracts the Riot API match history operations for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Any


class IMatchHistoryService(ABC):
    """Port interface for retrieving player match history."""

    @abstractmethod
    async def list_recent_match_ids(self, puuid: str, platform: str, count: int = 5) -> list[str]:
        """Retrieve list of recent match IDs for a player.

        Args:
            puuid: Player's persistent unique ID
            platform: Platform code (e.g., 'na1', 'euw1', 'kr')
            count: Maximum number of match IDs to return

        Returns:
            List of match IDs in Match-V5 format (newest first)

        Raises:
            UpstreamError: If API call fails
        """
        pass

    @abstractmethod
    async def fetch_recent_matches(
        self, puuid: str, platform: str, count: int = 5
    ) -> list[dict[str, Any]]:
        """List recent match IDs and fetch each match payload in order.

        Raises:
            UpstreamError: If any request fails; no partial list is returned
        """
        pass
