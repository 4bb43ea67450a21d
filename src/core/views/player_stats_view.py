"""Player stats view

Transforms PlayerStatsResult into the /stats Discord embed and maps lookup
failures to user-facing error embeds.
"""

import logging

import discord

from src.contracts.discord_interactions import EmbedColor
from src.contracts.match import MatchStat
from src.contracts.player_stats import PlayerStatsResult
from src.core.errors import (
    MalformedRiotIdError,
    PlayerNotFoundError,
    UnsupportedRegionError,
    UpstreamError,
)
from src.core.routing import PLATFORM_TO_CLUSTER
from src.core.utils.clamp import clamp_field, clamp_text
from src.core.views.performance_chart import METRIC_LABELS, build_performance_chart_url

logger = logging.getLogger(__name__)

PROFILE_ICON_URL = "https://ddragon.leagueoflegends.com/cdn/14.24.1/img/profileicon/{icon_id}.png"


def _progress_bar(score: float, width: int = 10) -> str:
    """Return a bracketed bar string for a 0-100 score."""
    value = max(0.0, min(100.0, float(score)))
    filled = min(width, max(0, int(round(value / 100.0 * width))))
    return f"[{'█' * filled}{'▒' * (width - filled)}]"


def _format_match_line(match: MatchStat) -> str:
    result = "✅" if match.win else "❌"
    kda = match.kda if match.is_perfect_kda else f"{match.kda:.2f}"
    return (
        f"{result} **{match.champion_name}** ({match.role.value}) "
        f"{match.kda_line} · KDA {kda} · {match.cs_per_min:.1f} CS/m · "
        f"KP {match.kill_participation:.1f}% · {match.game_duration_minutes}m"
    )


def _format_ranked(result: PlayerStatsResult) -> str:
    ranked = result.ranked
    if ranked is None:
        if result.ranked_lookup.status == "failed":
            return "Unavailable"
        return "Unranked"
    return (
        f"**{ranked.full_rank}** · {ranked.league_points} LP\n"
        f"{ranked.wins}W {ranked.losses}L ({ranked.win_rate:.1f}%)"
    )


def render_player_stats_embed(result: PlayerStatsResult) -> discord.Embed:
    """Render a full /stats embed with rank, recent games and the radar chart."""
    index = result.performance_index
    embed = discord.Embed(
        title=f"📊 {result.display_name}",
        description=(
            f"Level {result.summoner.summoner_level} · {result.platform.value.upper()} "
            f"({PLATFORM_TO_CLUSTER[result.platform].value})\n"
            f"Primary role: **{result.primary_role.value}**"
        ),
        color=EmbedColor.STATS,
    )
    embed.set_thumbnail(url=PROFILE_ICON_URL.format(icon_id=result.summoner.profile_icon_id))

    embed.add_field(name="🏆 Solo/Duo", value=_format_ranked(result), inline=True)
    embed.add_field(
        name="⭐ Performance Index",
        value=f"**{index.overall}**/100\n{_progress_bar(index.overall)}",
        inline=True,
    )

    metric_lines = [
        f"`{label:<13}` {_progress_bar(getattr(index.metrics, name))} {getattr(index.metrics, name)}"
        for name, label in METRIC_LABELS
    ]
    embed.add_field(name="📈 Breakdown", value=clamp_field("\n".join(metric_lines)), inline=False)

    if result.recent_matches:
        lines = [_format_match_line(m) for m in result.recent_matches]
        embed.add_field(
            name=f"🕹️ Last {len(result.recent_matches)} games ({result.wins}W {result.losses}L)",
            value=clamp_field("\n".join(lines)),
            inline=False,
        )
        embed.set_image(url=build_performance_chart_url(index.metrics))
    else:
        embed.add_field(name="🕹️ Recent games", value="No recent matches found", inline=False)

    embed.set_footer(text="Performance Index is a community metric, not an official Riot stat")
    return embed


def describe_lookup_error(error: Exception) -> tuple[str, bool]:
    """Map a lookup failure to (message, user_correctable)."""
    if isinstance(error, MalformedRiotIdError):
        return "Invalid Riot ID format. Use: GameName#TAG", True
    if isinstance(error, UnsupportedRegionError):
        known = ", ".join(p.value for p in PLATFORM_TO_CLUSTER)
        return f"Unsupported region `{error.platform}`. Try one of: {known}", True
    if isinstance(error, PlayerNotFoundError):
        return (
            f"Summoner `{error.game_name}#{error.tag_line}` not found. "
            "Check the Riot ID format (GameName#TAG)",
            True,
        )
    if isinstance(error, UpstreamError) and error.is_rate_limited:
        wait = f" in {error.retry_after}s" if error.retry_after else " in a minute"
        return f"Riot API is rate limiting requests, try again{wait}.", False
    if isinstance(error, UpstreamError):
        return "Could not reach the Riot API right now. Please try again later.", False
    logger.error(f"Unexpected stats lookup error: {error}", exc_info=error)
    return "Something went wrong fetching player stats.", False


def render_error_embed(error_message: str, retry_suggested: bool = True) -> discord.Embed:
    """Render error notification as Discord Embed."""
    message = clamp_text((error_message or "Unknown error").strip(), 500)
    suggestion = (
        "💡 The problem is probably temporary, please retry shortly."
        if retry_suggested
        else "✏️ Fix the input above and run the command again."
    )
    return discord.Embed(
        title="❌ Error",
        description=f"{message}\n\n{suggestion}",
        color=EmbedColor.ERROR,
    )


def render_lookup_error_embed(error: Exception) -> discord.Embed:
    message, user_correctable = describe_lookup_error(error)
    return render_error_embed(message, retry_suggested=not user_correctable)
