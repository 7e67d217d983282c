"""Thin wrapper around the Firecrawl SDK.

One SDK client is built per call from the invoking user's API key. Errors from
the SDK are not handled here, the command handler decides what the user sees.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Optional

from firecrawl import AsyncFirecrawlApp

if TYPE_CHECKING:
    from firecrawl_bot.commands.params import ExtractParams, MapParams, ScrapeParams

logger = logging.getLogger(__name__)


class FirecrawlGateway:
    def __init__(
        self,
        api_url: Optional[str] = None,
        client_factory: Callable[..., Any] = AsyncFirecrawlApp,
    ) -> None:
        self._api_url = api_url
        self._client_factory = client_factory

    def client_for(self, api_key: str) -> Any:
        return self._client_factory(api_key=api_key, api_url=self._api_url)

    async def scrape(self, api_key: str, params: ScrapeParams) -> Any:
        client = self.client_for(api_key)
        started = time.perf_counter()
        result = await client.scrape_url(params.url, **params.to_options())
        logger.info("scrape %s finished in %.2fs", params.url, time.perf_counter() - started)
        return result

    async def map(self, api_key: str, params: MapParams) -> Any:
        client = self.client_for(api_key)
        started = time.perf_counter()
        result = await client.map_url(params.url, **params.to_options())
        logger.info("map %s finished in %.2fs", params.url, time.perf_counter() - started)
        return result

    async def extract(self, api_key: str, params: ExtractParams) -> Any:
        client = self.client_for(api_key)
        started = time.perf_counter()
        result = await client.extract(params.urls, **params.to_options())
        logger.info(
            "extract over %d url(s) finished in %.2fs",
            len(params.urls or []),
            time.perf_counter() - started,
        )
        return result
