"""Match history service implementation.

Lists a player's recent match IDs and fetches each match payload under an
explicit concurrency policy. Riot's per-key rate limit is the reason the
default policy allows a single match-detail request in flight.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from src.core.ports import RiotAPIPort
from src.core.ports.match_history_port import IMatchHistoryService

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class FetchPolicy:
    """Bounded-concurrency policy for per-item fetches.

    Items are processed in input order in batches of ``max_in_flight``;
    results keep input order and the first failure stops the run.
    """

    def __init__(self, max_in_flight: int = 1) -> None:
        if max_in_flight < 1:
            raise ValueError("max_in_flight must be >= 1")
        self.max_in_flight = max_in_flight

    async def run(self, fetch: Callable[[T], Awaitable[R]], items: Sequence[T]) -> list[R]:
        results: list[R] = []
        for start in range(0, len(items), self.max_in_flight):
            batch = items[start : start + self.max_in_flight]
            if len(batch) == 1:
                results.append(await fetch(batch[0]))
            else:
                results.extend(await asyncio.gather(*(fetch(item) for item in batch)))
        return results


SEQUENTIAL_FETCH_POLICY = FetchPolicy(max_in_flight=1)


class MatchHistoryService(IMatchHistoryService):
    """Production implementation of match history service."""

    def __init__(self, riot_api: RiotAPIPort, policy: FetchPolicy = SEQUENTIAL_FETCH_POLICY) -> None:
        self.riot_api = riot_api
        self.policy = policy

    async def list_recent_match_ids(self, puuid: str, platform: str, count: int = 5) -> list[str]:
        return await self.riot_api.get_match_ids(puuid, platform, count=count)

    async def fetch_match_details(self, match_ids: Sequence[str], platform: str) -> list[dict[str, Any]]:
        async def _fetch(match_id: str) -> dict[str, Any]:
            return await self.riot_api.get_match_details(match_id, platform)

        return await self.policy.run(_fetch, list(match_ids))

    async def fetch_recent_matches(
        self, puuid: str, platform: str, count: int = 5
    ) -> list[dict[str, Any]]:
        match_ids = await self.list_recent_match_ids(puuid, platform, count=count)
        logger.info(f"Fetching {len(match_ids)} match(es) for puuid {puuid[:8]}...")
        return await self.fetch_match_details(match_ids, platform)
