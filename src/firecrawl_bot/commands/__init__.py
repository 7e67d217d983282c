"""Bot command handlers.

Architecture:
- keys.py: API key management (set-api-key, update-api-key)
- scraping.py: Firecrawl commands (scrape, map, extract)
- info.py: static replies (docs, help)
- params.py: JSON params models and validation for scraping.py
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import info, keys, scraping

if TYPE_CHECKING:
    from ..router import CommandRouter

__all__ = ["register_all"]


def register_all(router: CommandRouter) -> None:
    """Register every command handler with the router."""
    keys.register(router)
    scraping.register(router)
    info.register(router)
