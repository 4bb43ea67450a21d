"""Player stats aggregation.

Runs the /stats pipeline strictly in sequence:
account → summoner → ranked (optional) → match ids → match details →
per-match stats → primary role → performance index.

Only the ranked stage is allowed to fail; its outcome is recorded in
RankedLookup. Every other failure propagates to the caller unchanged.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from src.contracts.common import Platform
from src.contracts.player_stats import PlayerStatsResult
from src.contracts.summoner import PlayerIdentity, RankedLookup, SummonerRecord
from src.core.errors import UpstreamError
from src.core.observability import trace_service
from src.core.ports import RiotAPIPort
from src.core.ports.match_history_port import IMatchHistoryService
from src.core.routing import normalize_platform, routing_cluster_for
from src.core.scoring import calculate_performance_index, calculate_primary_role
from src.core.services.match_history_service import MatchHistoryService
from src.core.services.match_stat_extractor import extract_match_stat

logger = logging.getLogger(__name__)


class PlayerStatsService:
    def __init__(
        self,
        riot_api: RiotAPIPort,
        match_history: IMatchHistoryService | None = None,
        *,
        match_count: int = 5,
        default_platform: Platform | str = Platform.NA1,
    ) -> None:
        self.riot_api = riot_api
        self.match_history = match_history or MatchHistoryService(riot_api)
        self.match_count = match_count
        self.default_platform = normalize_platform(default_platform)

    async def _lookup_ranked(self, summoner: SummonerRecord, platform: Platform) -> RankedLookup:
        if not summoner.id:
            logger.warning(
                f"Summoner missing 'id' on platform {platform.value}; skipping ranked stats. "
                "The player may be on a different region."
            )
            return RankedLookup.skipped()
        try:
            entry = await self.riot_api.get_ranked_solo_entry(summoner.id, platform)
        except (UpstreamError, ValidationError) as e:
            logger.warning(f"Failed to fetch ranked stats: {e}")
            return RankedLookup.failed(e)
        if entry is None:
            return RankedLookup.absent()
        return RankedLookup.found(entry)

    @trace_service
    async def get_player_stats(
        self, riot_id: str, platform: Platform | str | None = None
    ) -> PlayerStatsResult:
        """Aggregate account, rank, recent matches and performance index for a Riot ID.

        Raises:
            MalformedRiotIdError: ``riot_id`` is not ``Name#Tag`` (no request made)
            UnsupportedRegionError: unknown platform code (no request made)
            PlayerNotFoundError: Account-V1 returned 404
            UpstreamError: any other failed request outside the ranked stage
        """
        resolved_platform = normalize_platform(platform or self.default_platform)
        identity = PlayerIdentity.parse(riot_id)
        logger.info(
            f"Looking up {identity.riot_id} on {resolved_platform.value} "
            f"(cluster {routing_cluster_for(resolved_platform).value})"
        )

        account = await self.riot_api.get_account_by_riot_id(identity.riot_id, resolved_platform)
        summoner = await self.riot_api.get_summoner_by_puuid(account.puuid, resolved_platform)
        ranked_lookup = await self._lookup_ranked(summoner, resolved_platform)

        matches = await self.match_history.fetch_recent_matches(
            account.puuid, resolved_platform, count=self.match_count
        )
        recent_matches = [
            stat
            for stat in (extract_match_stat(match, account.puuid) for match in matches)
            if stat is not None
        ]

        return PlayerStatsResult(
            platform=resolved_platform,
            account=account,
            summoner=summoner,
            ranked=ranked_lookup.entry,
            ranked_lookup=ranked_lookup,
            recent_matches=recent_matches,
            primary_role=calculate_primary_role(recent_matches),
            performance_index=calculate_performance_index(recent_matches),
        )
