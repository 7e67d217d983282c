import logging
import sys
from typing import Optional

import discord
from discord import app_commands
from pydantic import ValidationError

from firecrawl_bot.client import FirecrawlGateway
from firecrawl_bot.commands import register_all as register_handlers
from firecrawl_bot.config import Settings, get_settings
from firecrawl_bot.errors import ConfigError
from firecrawl_bot.registry import register_all as register_slash_commands
from firecrawl_bot.router import CommandRouter
from firecrawl_bot.store import InMemoryKeyStore, KeyStore

logger = logging.getLogger("firecrawl_bot")


def build_router(
    settings: Settings,
    store: Optional[KeyStore] = None,
    gateway: Optional[FirecrawlGateway] = None,
) -> CommandRouter:
    router = CommandRouter(
        store=store if store is not None else InMemoryKeyStore(),
        gateway=gateway if gateway is not None else FirecrawlGateway(api_url=settings.FIRECRAWL_API_URL),
        settings=settings,
    )
    register_handlers(router)
    return router


class FirecrawlBot(discord.Client):
    """Discord client exposing the Firecrawl commands as slash commands."""

    def __init__(self, settings: Settings, router: CommandRouter) -> None:
        super().__init__(intents=discord.Intents.default(), application_id=settings.CLIENT_ID)
        self.settings = settings
        self.tree = app_commands.CommandTree(self)
        register_slash_commands(self.tree, router)

    async def setup_hook(self) -> None:
        guild = discord.Object(id=self.settings.DISCORD_GUILD_ID) if self.settings.DISCORD_GUILD_ID else None
        try:
            if guild is not None:
                self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            logger.info("✅ Successfully registered %d application commands.", len(synced))
        except discord.HTTPException as e:
            logger.error("Error registering commands: %s", e)

    async def on_ready(self) -> None:
        logger.info("✅ Logged in as %s", self.user)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = get_settings()
        settings.require_startup()
    except ValidationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)
    except ConfigError as e:
        logger.error("%s", e.message)
        sys.exit(1)

    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())

    bot = FirecrawlBot(settings, build_router(settings))
    # Root logging is configured above, keep discord.py from adding its own handler
    bot.run(settings.DISCORD_TOKEN, log_handler=None)


if __name__ == "__main__":
    main()
