"""Riot API adapter over aiohttp.

Provides:
- Account-V1 by Riot ID (routing cluster)
- Summoner-V4 by PUUID (platform)
- League-V4 entries by summoner (platform)
- Match-V5 IDs/Match (routing cluster)

Every call is a single authenticated GET. Failures surface as UpstreamError
(PlayerNotFoundError for an unknown Riot ID); nothing is retried.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from src.config.settings import Settings, get_settings
from src.contracts.common import SOLO_QUEUE_TYPE, Platform, RoutingCluster
from src.contracts.summoner import (
    AccountRecord,
    PlayerIdentity,
    RankedEntry,
    SummonerRecord,
)
from src.core.errors import PlayerNotFoundError, UpstreamError
from src.core.observability import trace_adapter
from src.core.ports import RiotAPIPort
from src.core.routing import normalize_platform, routing_cluster_for

logger = logging.getLogger(__name__)

MAX_MATCH_IDS = 100


@dataclass(frozen=True)
class RiotAPIConfig:
    """Static credentials and transport settings for the Riot API."""

    api_key: str
    timeout_seconds: float = 10.0
    host_template: str = "https://{host}.api.riotgames.com"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> RiotAPIConfig:
        settings = settings or get_settings()
        return cls(
            api_key=settings.riot_api_key,
            timeout_seconds=settings.riot_request_timeout_seconds,
        )


class RiotAPIAdapter(RiotAPIPort):
    def __init__(self, config: RiotAPIConfig) -> None:
        if not config.api_key:
            raise ValueError("Riot API key is required")
        self.config = config
        self._session: aiohttp.ClientSession | None = None
        self._session_loop: asyncio.AbstractEventLoop | None = None
        logger.info("Riot API adapter initialized")

    async def __aenter__(self) -> RiotAPIAdapter:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        loop = asyncio.get_running_loop()
        needs_new_session = (
            self._session is None
            or getattr(self._session, "closed", True)
            or self._session_loop is None
            or self._session_loop is not loop
        )
        if needs_new_session:
            if self._session and not getattr(self._session, "closed", True):
                try:
                    await self._session.close()
                except Exception:
                    logger.warning("Failed to close stale Riot API session", exc_info=True)
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._session_loop = loop
        return self._session

    async def close(self) -> None:
        try:
            if self._session and not self._session.closed:
                await self._session.close()
        finally:
            self._session = None
            self._session_loop = None

    # ------------------------------------------------------------------
    # HTTP fetch layer
    # ------------------------------------------------------------------

    def _platform_url(self, platform: Platform, path: str) -> str:
        return self.config.host_template.format(host=platform.value) + path

    def _cluster_url(self, cluster: RoutingCluster, path: str) -> str:
        return self.config.host_template.format(host=cluster.value) + path

    @staticmethod
    async def _read_body(resp: aiohttp.ClientResponse) -> Any:
        text = await resp.text()
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def authenticated_get(self, url: str) -> Any:
        """GET ``url`` with the API key header and return decoded JSON."""
        session = await self._ensure_session()
        try:
            async with session.get(url, headers={"X-Riot-Token": self.config.api_key}) as resp:
                if 200 <= resp.status < 300:
                    try:
                        return await resp.json(content_type=None)
                    except ValueError as e:
                        logger.error(f"Riot API returned undecodable body for {url}: {e}")
                        raise UpstreamError(
                            f"Malformed JSON (HTTP {resp.status}): {e}",
                            status_code=resp.status,
                            url=url,
                        ) from e
                body = await self._read_body(resp)
                retry_after = resp.headers.get("Retry-After")
                logger.error(f"Riot API error {resp.status} for {url}: {body}")
                raise UpstreamError(
                    f"HTTP {resp.status}: {body}",
                    status_code=resp.status,
                    body=body,
                    url=url,
                    retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            message = str(e) or type(e).__name__
            logger.error(f"Riot API transport error for {url}: {message}")
            raise UpstreamError(message, body=message, url=url) from e

    # ------------------------------------------------------------------
    # Resolvers
    # ------------------------------------------------------------------

    @trace_adapter
    async def get_account_by_riot_id(self, riot_id: str, platform: Platform | str) -> AccountRecord:
        identity = PlayerIdentity.parse(riot_id)
        cluster = routing_cluster_for(platform)
        url = self._cluster_url(
            cluster,
            "/riot/account/v1/accounts/by-riot-id/"
            f"{quote(identity.game_name, safe='')}/{quote(identity.tag_line, safe='')}",
        )
        try:
            data = await self.authenticated_get(url)
        except UpstreamError as e:
            if e.status_code == 404:
                raise PlayerNotFoundError(
                    identity.game_name, identity.tag_line, url=url, body=e.body
                ) from e
            raise
        if not isinstance(data, dict):
            raise UpstreamError("Unexpected account payload", body=data, url=url)
        return AccountRecord.model_validate(
            {
                "puuid": data.get("puuid", ""),
                "gameName": data.get("gameName", identity.game_name),
                "tagLine": data.get("tagLine", identity.tag_line),
            }
        )

    @trace_adapter
    async def get_summoner_by_puuid(self, puuid: str, platform: Platform | str) -> SummonerRecord:
        url = self._platform_url(
            normalize_platform(platform), f"/lol/summoner/v4/summoners/by-puuid/{puuid}"
        )
        data = await self.authenticated_get(url)
        return SummonerRecord.model_validate(data if isinstance(data, dict) else {})

    @trace_adapter
    async def get_ranked_solo_entry(
        self, summoner_id: str, platform: Platform | str
    ) -> RankedEntry | None:
        url = self._platform_url(
            normalize_platform(platform), f"/lol/league/v4/entries/by-summoner/{summoner_id}"
        )
        data = await self.authenticated_get(url)
        if not isinstance(data, list):
            raise UpstreamError("Unexpected league entries payload", body=data, url=url)
        for entry in data:
            if isinstance(entry, dict) and entry.get("queueType") == SOLO_QUEUE_TYPE:
                try:
                    return RankedEntry.model_validate(entry)
                except ValidationError as e:
                    raise UpstreamError(
                        f"Malformed solo queue entry: {e.error_count()} error(s)", body=entry, url=url
                    ) from e
        return None

    @trace_adapter
    async def get_match_ids(self, puuid: str, platform: Platform | str, count: int = 5) -> list[str]:
        count = max(0, min(count, MAX_MATCH_IDS))
        if count == 0:
            return []
        url = self._cluster_url(
            routing_cluster_for(platform),
            f"/lol/match/v5/matches/by-puuid/{puuid}/ids?start=0&count={count}",
        )
        data = await self.authenticated_get(url)
        if not isinstance(data, list):
            raise UpstreamError("Unexpected match id payload", body=data, url=url)
        return [str(m) for m in data][:count]

    @trace_adapter
    async def get_match_details(self, match_id: str, platform: Platform | str) -> dict[str, Any]:
        url = self._cluster_url(
            routing_cluster_for(platform), f"/lol/match/v5/matches/{match_id}"
        )
        data = await self.authenticated_get(url)
        if not isinstance(data, dict):
            raise UpstreamError("Unexpected match payload", body=data, url=url)
        return data
