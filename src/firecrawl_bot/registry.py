import logging
from typing import Optional

import discord
from discord import app_commands

from firecrawl_bot.responder import DiscordResponder
from firecrawl_bot.router import CommandRequest, CommandRouter

logger = logging.getLogger(__name__)


def register_all(tree: app_commands.CommandTree, router: CommandRouter) -> None:
    """Declare the seven slash commands on the command tree.

    Callbacks only translate the interaction into a CommandRequest. All
    behaviour lives in the router's handlers.
    """

    async def _dispatch(interaction: discord.Interaction, command: str, argument: Optional[str] = None) -> None:
        request = CommandRequest(command=command, user_id=str(interaction.user.id), argument=argument)
        await router.dispatch(request, DiscordResponder(interaction))

    # ---------------------------------------------------------------------
    # API keys
    # ---------------------------------------------------------------------
    @tree.command(name="set-api-key", description="Set your Firecrawl API key")
    @app_commands.describe(key="Your Firecrawl API key")
    async def set_api_key(interaction: discord.Interaction, key: str) -> None:
        await _dispatch(interaction, "set-api-key", key)

    @tree.command(name="update-api-key", description="Update your existing Firecrawl API key")
    @app_commands.describe(key="Your new Firecrawl API key")
    async def update_api_key(interaction: discord.Interaction, key: str) -> None:
        await _dispatch(interaction, "update-api-key", key)

    # ---------------------------------------------------------------------
    # Firecrawl
    # ---------------------------------------------------------------------
    @tree.command(name="scrape", description="Scrape a webpage")
    @app_commands.describe(params="JSON parameters for scraping")
    async def scrape(interaction: discord.Interaction, params: str) -> None:
        await _dispatch(interaction, "scrape", params)

    @tree.command(name="map", description="Map URLs from a starting point")
    @app_commands.describe(params="JSON parameters for mapping")
    async def map_urls(interaction: discord.Interaction, params: str) -> None:
        await _dispatch(interaction, "map", params)

    @tree.command(name="extract", description="Extract structured data from webpages")
    @app_commands.describe(params="JSON parameters for extraction")
    async def extract(interaction: discord.Interaction, params: str) -> None:
        await _dispatch(interaction, "extract", params)

    # ---------------------------------------------------------------------
    # Info
    # ---------------------------------------------------------------------
    @tree.command(name="docs", description="Get the documentation URL")
    async def docs(interaction: discord.Interaction) -> None:
        await _dispatch(interaction, "docs")

    @tree.command(name="help", description="Get help with using the bot")
    async def help_(interaction: discord.Interaction) -> None:
        await _dispatch(interaction, "help")

    logger.debug("Declared %d slash commands", len(tree.get_commands()))
