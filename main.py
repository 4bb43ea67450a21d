"""
Main entry point for the LoLdle Discord Bot.
"""

import asyncio
import logging
import os
import sys

from pydantic import ValidationError

from src.core.observability import configure_stdlib_json_logging


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Set up structured JSON logging for both stdout and file."""
    try:
        os.makedirs("logs", exist_ok=True)
        file_target = os.path.join("logs", "loldle_bot.log")
    except OSError:
        # Fallback to CWD if logs/ is not writable
        file_target = "loldle_bot.log"

    configure_stdlib_json_logging(level=level, file_target=file_target)

    # Reduce discord.py logging verbosity unless in debug mode
    if not debug:
        logging.getLogger("discord").setLevel(logging.INFO)
        logging.getLogger("discord.http").setLevel(logging.WARNING)


def load_settings():
    """Load settings once; missing credentials are fatal at startup."""
    from src.config.settings import get_settings

    try:
        return get_settings()
    except ValidationError as e:
        missing = ", ".join(
            str(err["loc"][0]) for err in e.errors() if err.get("type") == "missing"
        )
        print(f"Invalid configuration. Missing: {missing or 'n/a'}\n{e}", file=sys.stderr)
        sys.exit(1)


def health_check(settings) -> None:
    """Perform basic health checks before starting the bot."""
    logger = logging.getLogger(__name__)
    logger.info("Performing health checks...")

    if not settings.discord_bot_token.strip():
        logger.error("Discord bot token is empty!")
        sys.exit(1)

    if not settings.riot_api_key.strip():
        logger.error("RIOT_API_KEY is empty!")
        sys.exit(1)
    logger.info(f"RIOT_API_KEY loaded (length: {len(settings.riot_api_key)})")

    if not settings.announcement_channel_id:
        logger.warning("ANNOUNCEMENT_CHANNEL_ID not set; daily announcement disabled")

    logger.info("Health checks passed ✓")


async def main() -> None:
    """Main async entry point."""
    settings = load_settings()
    setup_logging(settings.app_log_level, settings.app_debug)
    logger = logging.getLogger(__name__)

    from src.adapters.discord_adapter import DiscordAdapter
    from src.adapters.riot_api import RiotAPIAdapter, RiotAPIConfig
    from src.core.services import PlayerStatsService

    logger.info(f"Starting {settings.app_name} v{settings.app_version}...")
    health_check(settings)

    riot_api = RiotAPIAdapter(RiotAPIConfig.from_settings(settings))
    stats_service = PlayerStatsService(
        riot_api,
        match_count=settings.riot_match_count,
        default_platform=settings.riot_default_platform,
    )
    discord_adapter = DiscordAdapter(player_stats_service=stats_service, settings=settings)

    try:
        logger.info("Bot initialization complete. Connecting to Discord...")
        await discord_adapter.start()
    finally:
        logger.info("Shutting down services...")
        try:
            await discord_adapter.stop()
        except Exception as e:
            logger.warning(f"Failed to stop Discord adapter cleanly: {e}")
        await riot_api.close()
        logger.info("All services stopped")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nBot stopped by user.")


if __name__ == "__main__":
    run()
