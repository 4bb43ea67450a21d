"""Error taxonomy for the player stats pipeline.

Input errors (malformed Riot ID, unsupported region, unknown player) are
user-correctable; everything else coming back from Riot is an ``UpstreamError``.
"""

from __future__ import annotations

from typing import Any


class PlayerStatsError(Exception):
    """Base class for all player stats lookup failures."""


class MalformedRiotIdError(PlayerStatsError, ValueError):
    def __init__(self, riot_id: str) -> None:
        super().__init__(f"Invalid Riot ID format: {riot_id!r}. Use: GameName#TAG")
        self.riot_id = riot_id


class UnsupportedRegionError(PlayerStatsError, ValueError):
    def __init__(self, platform: Any) -> None:
        super().__init__(f"Unsupported platform region: {platform}")
        self.platform = platform


class UpstreamError(PlayerStatsError):
    """Non-2xx response or transport failure from the Riot API.

    ``status_code`` is None for network-level failures (DNS, timeout, reset).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
        url: str | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.url = url
        self.retry_after = retry_after

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_transport_error(self) -> bool:
        return self.status_code is None


class PlayerNotFoundError(UpstreamError):
    """Account lookup returned 404."""

    def __init__(self, game_name: str, tag_line: str, *, url: str | None = None, body: Any = None) -> None:
        super().__init__(
            f"Summoner not found: {game_name}#{tag_line}",
            status_code=404,
            body=body,
            url=url,
        )
        self.game_name = game_name
        self.tag_line = tag_line
