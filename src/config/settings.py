"""
Configuration settings using Pydantic Settings.

All sensitive configuration must be loaded from environment variables.
Never hardcode API keys or credentials in the code.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Order: init kwargs > .env (dotenv) > env vars > file secrets
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ):
        return (
            init_settings,
            dotenv_settings,
            env_settings,
            file_secret_settings,
        )

    # Riot API Configuration
    riot_api_key: str = Field(..., validation_alias=AliasChoices("RIOT_API_KEY"))
    riot_default_platform: str = Field(
        "na1", validation_alias=AliasChoices("RIOT_DEFAULT_PLATFORM", "RIOT_REGION")
    )
    riot_request_timeout_seconds: float = Field(
        10.0, gt=0, alias="RIOT_REQUEST_TIMEOUT_SECONDS"
    )
    riot_match_count: int = Field(5, ge=1, le=20, alias="RIOT_MATCH_COUNT")

    # Discord Configuration
    discord_bot_token: str = Field(
        ..., validation_alias=AliasChoices("DISCORD_BOT_TOKEN", "DISCORD_TOKEN")
    )
    discord_application_id: str | None = Field(
        None, validation_alias=AliasChoices("DISCORD_APPLICATION_ID", "DISCORD_CLIENT_ID")
    )
    discord_guild_id: str | None = Field(
        None, validation_alias=AliasChoices("DISCORD_GUILD_ID", "GUILD_ID")
    )
    bot_prefix: str = Field("!", alias="BOT_PREFIX")

    # Daily LoLdle announcement
    announcement_channel_id: int | None = Field(None, alias="ANNOUNCEMENT_CHANNEL_ID")
    announcement_hour: int = Field(2, ge=0, le=23, alias="ANNOUNCEMENT_HOUR")
    announcement_timezone: str = Field("America/New_York", alias="ANNOUNCEMENT_TIMEZONE")
    loldle_url: str = Field("https://loldle.net", alias="LOLDLE_URL")

    # Application Configuration
    app_name: str = Field("LoLdle Bot", alias="APP_NAME")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    app_env: str = Field("development", alias="APP_ENV")
    app_debug: bool = Field(False, alias="APP_DEBUG")
    app_log_level: str = Field("INFO", alias="APP_LOG_LEVEL")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the settings singleton.

    Loaded once on first use and read-only afterwards. Raises a pydantic
    ValidationError when required credentials are missing.
    """
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings
