"""
Discord adapter for handling bot interactions and commands.

Registers /loldle and /stats, and posts the daily LoLdle announcement.
"""

import datetime as dt
import logging
import uuid
from typing import Any
from zoneinfo import ZoneInfo

import discord
from discord import app_commands
from discord.ext import commands, tasks

from src.config.settings import Settings, get_settings
from src.contracts.discord_interactions import CommandName
from src.contracts.summoner import PlayerIdentity
from src.core.errors import MalformedRiotIdError, PlayerStatsError, UnsupportedRegionError
from src.core.observability import clear_correlation_id, set_correlation_id
from src.core.routing import normalize_platform
from src.core.services.player_stats_service import PlayerStatsService
from src.core.views.loldle_view import (
    build_loldle_button,
    format_daily_announcement,
    format_loldle_reply,
    pick_emote,
    pick_message,
)
from src.core.views.player_stats_view import (
    render_error_embed,
    render_lookup_error_embed,
    render_player_stats_embed,
)

# Configure logging
logger = logging.getLogger(__name__)

PLATFORM_CHOICES = [
    app_commands.Choice(name=label, value=value)
    for label, value in (
        ("NA", "na1"),
        ("EUW", "euw1"),
        ("EUNE", "eun1"),
        ("KR", "kr"),
        ("JP", "jp1"),
        ("BR", "br1"),
        ("LAN", "la1"),
        ("LAS", "la2"),
        ("OCE", "oc1"),
        ("TR", "tr1"),
        ("RU", "ru"),
        ("SG", "sg2"),
        ("TW", "tw2"),
        ("VN", "vn2"),
        ("TH", "th2"),
        ("PH", "ph2"),
    )
]


def announcement_time(settings: Settings) -> dt.time:
    """Wall-clock time of the daily announcement in the configured timezone."""
    return dt.time(hour=settings.announcement_hour, tzinfo=ZoneInfo(settings.announcement_timezone))


class LoldleBot(commands.Bot):
    """Main Discord bot class."""

    def __init__(self, settings: Settings | None = None, **kwargs: Any) -> None:
        """Initialize the bot with custom settings."""
        intents = discord.Intents.default()
        intents.guilds = True
        intents.emojis_and_stickers = True

        command_prefix = kwargs.pop("command_prefix", "!")

        super().__init__(command_prefix=command_prefix, intents=intents, **kwargs)

        self.settings = settings or get_settings()
        self.startup_time: dt.datetime | None = None

    async def setup_hook(self) -> None:
        """Hook called when bot is getting ready."""
        logger.info("Setting up bot hooks...")

        if self.settings.discord_guild_id:
            # Development mode: guild commands update instantly
            guild = discord.Object(id=int(self.settings.discord_guild_id))
            self.tree.copy_global_to(guild=guild)
            await self.tree.sync(guild=guild)
            logger.info(f"Synced commands to guild {self.settings.discord_guild_id}")
        else:
            # Production mode: global commands can take a while to appear
            await self.tree.sync()
            logger.info("Synced commands globally")

    async def on_ready(self) -> None:
        """Event triggered when bot is ready."""
        self.startup_time = dt.datetime.now(dt.UTC)
        logger.info(f"Bot {self.user} is ready!")
        logger.info(f"Connected to {len(self.guilds)} guilds")

        await self.change_presence(
            activity=discord.Game(name="/loldle · /stats"),
            status=discord.Status.online,
        )


class DiscordAdapter:
    """Adapter for Discord interactions following hexagonal architecture."""

    def __init__(
        self,
        player_stats_service: PlayerStatsService | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize the Discord adapter.

        Args:
            player_stats_service: Stats pipeline backing /stats; the command is
                not registered without it
            settings: Application settings (defaults to the process settings)
        """
        self.settings = settings or get_settings()
        self.player_stats_service = player_stats_service

        app_id = (
            int(self.settings.discord_application_id)
            if self.settings.discord_application_id
            else None
        )
        self.bot = LoldleBot(
            settings=self.settings, command_prefix=self.settings.bot_prefix, application_id=app_id
        )
        self.daily_announcement = tasks.loop(time=announcement_time(self.settings))(
            self.post_daily_announcement
        )
        self._setup_commands()
        self._setup_event_handlers()

    def _setup_commands(self) -> None:
        """Set up slash commands."""

        @self.bot.tree.command(
            name=CommandName.LOLDLE.value,
            description="Open today's LoLdle",
        )
        async def loldle_command(interaction: discord.Interaction) -> None:
            """Handle /loldle command."""
            await self._handle_loldle_command(interaction)

        if self.player_stats_service is None:
            logger.info("Skipping /stats registration: stats service not configured")
            return

        @self.bot.tree.command(
            name=CommandName.STATS.value,
            description="Look up a player's rank, recent games and performance index",
        )
        @app_commands.describe(
            riot_id="Riot ID, e.g. Faker#KR1",
            platform="Server the account plays on (default: NA)",
        )
        @app_commands.choices(platform=PLATFORM_CHOICES)
        async def stats_command(
            interaction: discord.Interaction,
            riot_id: str,
            platform: app_commands.Choice[str] | None = None,
        ) -> None:
            """Handle /stats command."""
            await self._handle_stats_command(
                interaction, riot_id, platform.value if platform else None
            )

    def _setup_event_handlers(self) -> None:
        """Set up event handlers for the bot."""

        @self.daily_announcement.before_loop
        async def wait_for_ready() -> None:
            await self.bot.wait_until_ready()

        @self.bot.tree.error
        async def on_app_command_error(
            interaction: discord.Interaction, error: app_commands.AppCommandError
        ) -> None:
            """Handle application command errors."""
            logger.error(f"Command error: {error}", exc_info=True)
            embed = render_error_embed("Something broke handling that command.")
            try:
                if interaction.response.is_done():
                    await interaction.followup.send(embed=embed)
                else:
                    await interaction.response.send_message(embed=embed, ephemeral=True)
            except discord.HTTPException:
                logger.warning("Could not deliver command error message", exc_info=True)

    async def _handle_loldle_command(self, interaction: discord.Interaction) -> None:
        """Reply publicly with a random message, a guild emote and the LoLdle button."""
        content = format_loldle_reply(
            interaction.user.mention, pick_message(), pick_emote(interaction.guild)
        )
        await interaction.response.send_message(
            content=content,
            view=build_loldle_button(self.settings.loldle_url),
            allowed_mentions=discord.AllowedMentions(users=False),
        )

    async def _handle_stats_command(
        self, interaction: discord.Interaction, riot_id: str, platform: str | None = None
    ) -> None:
        """Handle the /stats slash command.

        Input errors are answered ephemerally before deferring; once deferred,
        the followup replaces the public "thinking" message.
        """
        if self.player_stats_service is None:
            logger.error("/stats invoked without a stats service")
            await interaction.response.send_message(
                embed=render_error_embed("Player stats are not available right now."),
                ephemeral=True,
            )
            return

        try:
            identity = PlayerIdentity.parse(riot_id)
            resolved_platform = normalize_platform(platform) if platform else None
        except (MalformedRiotIdError, UnsupportedRegionError) as e:
            logger.info(f"/stats rejected input {riot_id!r} ({platform}): {e}")
            await interaction.response.send_message(
                embed=render_lookup_error_embed(e), ephemeral=True
            )
            return

        set_correlation_id(f"stats:{interaction.id}:{uuid.uuid4().hex[:8]}")
        try:
            # Lookups take several sequential Riot calls
            await interaction.response.defer(thinking=True)
            try:
                result = await self.player_stats_service.get_player_stats(
                    identity.riot_id, resolved_platform
                )
            except PlayerStatsError as e:
                logger.warning(f"/stats lookup failed for {identity.riot_id}: {e}")
                await interaction.followup.send(embed=render_lookup_error_embed(e))
                return
            await interaction.followup.send(embed=render_player_stats_embed(result))
            logger.info(f"/stats served for {result.display_name} by user {interaction.user.id}")
        finally:
            clear_correlation_id()

    async def post_daily_announcement(self) -> None:
        """Post the daily LoLdle announcement to the configured channel."""
        channel_id = self.settings.announcement_channel_id
        if not channel_id:
            logger.info("No ANNOUNCEMENT_CHANNEL_ID set, skipping daily announcement")
            return

        try:
            channel = self.bot.get_channel(channel_id) or await self.bot.fetch_channel(channel_id)
        except discord.HTTPException:
            logger.exception(f"Could not fetch announcement channel {channel_id}")
            return

        if not isinstance(channel, discord.abc.Messageable) or not hasattr(channel, "guild"):
            logger.error(f"Invalid announcement channel {channel_id}")
            return

        try:
            await channel.send(
                content=format_daily_announcement(pick_emote(channel.guild)),
                view=build_loldle_button(self.settings.loldle_url),
            )
        except discord.HTTPException:
            logger.exception("Error posting daily announcement")
            return
        logger.info(f"Posted daily LoLdle announcement at {dt.datetime.now(dt.UTC).isoformat()}")

    async def start(self) -> None:
        """Start the Discord bot."""
        logger.info("Starting Discord bot...")
        if not self.daily_announcement.is_running():
            self.daily_announcement.start()
            logger.info(
                "Daily announcement scheduler started "
                f"({self.settings.announcement_hour:02d}:00 {self.settings.announcement_timezone})"
            )
        await self.bot.start(self.settings.discord_bot_token)

    async def stop(self) -> None:
        """Stop the Discord bot."""
        logger.info("Stopping Discord bot...")
        if self.daily_announcement.is_running():
            self.daily_announcement.cancel()
        await self.bot.close()
