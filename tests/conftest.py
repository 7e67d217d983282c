"""Shared fixtures: settings, a fake Firecrawl SDK client and a recording responder."""

from typing import Any, Optional

import pytest

from firecrawl_bot.client import FirecrawlGateway
from firecrawl_bot.config import Settings
from firecrawl_bot.delivery import Attachment
from firecrawl_bot.main import build_router
from firecrawl_bot.responder import Responder
from firecrawl_bot.store import InMemoryKeyStore


class FakeFirecrawl:
    """Stands in for AsyncFirecrawlApp and records every call."""

    def __init__(self, api_key: str, api_url: Optional[str], result: Any = None, error: Optional[Exception] = None):
        self.api_key = api_key
        self.api_url = api_url
        self.result = result if result is not None else {"success": True}
        self.error = error
        self.calls: list[tuple[str, Any, dict[str, Any]]] = []

    async def _record(self, name: str, target: Any, options: dict[str, Any]) -> Any:
        self.calls.append((name, target, options))
        if self.error is not None:
            raise self.error
        return self.result

    async def scrape_url(self, url, **options):
        return await self._record("scrape_url", url, options)

    async def map_url(self, url, **options):
        return await self._record("map_url", url, options)

    async def extract(self, urls, **options):
        return await self._record("extract", urls, options)


class FakeFirecrawlFactory:
    def __init__(self) -> None:
        self.clients: list[FakeFirecrawl] = []
        self.result: Any = None
        self.error: Optional[Exception] = None

    def __call__(self, api_key: str, api_url: Optional[str] = None) -> FakeFirecrawl:
        client = FakeFirecrawl(api_key, api_url, result=self.result, error=self.error)
        self.clients.append(client)
        return client

    @property
    def calls(self) -> list[tuple[str, Any, dict[str, Any]]]:
        return [call for client in self.clients for call in client.calls]


class RecordingResponder(Responder):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[tuple] = []

    async def _defer(self) -> None:
        self.events.append(("defer",))

    async def _send(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        self.events.append(("send", content, ephemeral, attachment))

    async def _edit(self, content: str, *, attachment: Optional[Attachment]) -> None:
        self.events.append(("edit", content, attachment))

    async def _followup(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        self.events.append(("followup", content, ephemeral, attachment))

    @property
    def last(self) -> tuple:
        return self.events[-1]


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DISCORD_TOKEN="discord-token",
        CLIENT_ID=1234,
        RESPONSE_TMP_DIR=str(tmp_path),
    )


@pytest.fixture
def firecrawl_factory():
    return FakeFirecrawlFactory()


@pytest.fixture
def store():
    return InMemoryKeyStore()


@pytest.fixture
def router(settings, store, firecrawl_factory):
    return build_router(settings, store=store, gateway=FirecrawlGateway(client_factory=firecrawl_factory))


@pytest.fixture
def responder():
    return RecordingResponder()


@pytest.fixture
def make_responder():
    return RecordingResponder
