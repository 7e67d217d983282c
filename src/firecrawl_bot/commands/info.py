from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils import handle_command_errors

if TYPE_CHECKING:
    from ..responder import Responder
    from ..router import CommandRequest, CommandRouter

HELP_MESSAGE = """
🤖 **Firecrawl Discord Bot Help**

Before using any commands, set your API key using `/set-api-key`.

Available commands:
• `/set-api-key <key>` - Set your Firecrawl API key
• `/update-api-key <key>` - Update your existing API key
• `/scrape` - Scrape a webpage. Example:
  ```json
  {
    "url": "https://example.com",
    "formats": ["markdown", "html"],
    "onlyMainContent": true,
    "waitFor": 1000,
    "includeTags": ["article", "main"],
    "excludeTags": ["nav", "footer"],
    "mobile": false,
    "removeBase64Images": true,
    "skipTlsVerification": false,
    "timeout": 30000,
    "agent": {
      "model": "FIRE-1",
      "prompt": "Your custom prompt here"
    }
  }
  ```
• `/map` - Map URLs from a starting point. Example:
  ```json
  {
    "url": "https://example.com",
    "search": "optional search term",
    "ignoreSitemap": true,
    "sitemapOnly": false,
    "includeSubdomains": false,
    "limit": 5000
  }
  ```
• `/extract` - Extract structured data. Example:
  ```json
  {
    "urls": ["https://example.com"],
    "prompt": "Extract product information",
    "schema": {
      "name": "string",
      "price": "number",
      "description": "string"
    },
    "agent": {
      "model": "FIRE-1"
    }
  }
  ```
• `/docs` - Get documentation URL
• `/help` - Show this help message

For detailed API documentation, use `/docs`
"""


def register(router: CommandRouter) -> None:
    """Register the static informational commands."""

    @router.command("docs")
    @handle_command_errors
    async def docs(request: CommandRequest, responder: Responder) -> None:
        await responder.respond(f"📚 Documentation: {router.settings.FIRECRAWL_DOCS_URL}")

    @router.command("help")
    @handle_command_errors
    async def help_(request: CommandRequest, responder: Responder) -> None:
        await responder.respond(HELP_MESSAGE, ephemeral=True)
