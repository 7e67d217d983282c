from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from firecrawl_bot.errors import ConfigError


class Settings(BaseSettings):
    """Environment-driven configuration for the Discord bot."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Discord credentials
    DISCORD_TOKEN: str | None = None
    CLIENT_ID: int | None = None

    # Sync slash commands to one guild instead of globally. Global sync can take
    # up to an hour to propagate, guild sync is immediate.
    DISCORD_GUILD_ID: int | None = None

    # Firecrawl
    FIRECRAWL_API_URL: str | None = None
    FIRECRAWL_DOCS_URL: str = "https://docs.firecrawl.dev"

    # Discord caps messages at 2000 chars, leave room for the code fence
    INLINE_RESPONSE_LIMIT: int = 1900
    RESPONSE_TMP_DIR: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"

    def require_startup(self) -> None:
        """Raise ConfigError if a setting needed to log in is missing."""
        missing = [name for name in ("DISCORD_TOKEN", "CLIENT_ID") if not getattr(self, name)]
        if missing:
            raise ConfigError(
                f"Missing configuration. Please set {', '.join(missing)} in .env",
                {"missing": missing},
            )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
