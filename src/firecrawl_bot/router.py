"""Command routing.

Handlers register themselves by name with `@router.command(...)`. The router
owns the collaborators they share: the key store, the Firecrawl gateway and
the settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from firecrawl_bot.client import FirecrawlGateway
from firecrawl_bot.config import Settings
from firecrawl_bot.errors import CredentialMissing, UnknownFailure
from firecrawl_bot.responder import Responder
from firecrawl_bot.store import KeyStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandRequest:
    command: str
    user_id: str
    argument: Optional[str] = None


Handler = Callable[[CommandRequest, Responder], Awaitable[None]]


class CommandRouter:
    def __init__(self, store: KeyStore, gateway: FirecrawlGateway, settings: Settings) -> None:
        self.store = store
        self.gateway = gateway
        self.settings = settings
        self._handlers: dict[str, Handler] = {}

    def command(self, name: str) -> Callable[[Handler], Handler]:
        """Register the decorated coroutine as the handler for `name`."""

        def decorator(func: Handler) -> Handler:
            if name in self._handlers:
                raise ValueError(f"Command {name!r} is already registered")
            self._handlers[name] = func
            return func

        return decorator

    @property
    def commands(self) -> list[str]:
        return list(self._handlers)

    def require_key(self, user_id: str) -> str:
        api_key = self.store.get(user_id)
        if api_key is None:
            raise CredentialMissing(user_id)
        return api_key

    async def dispatch(self, request: CommandRequest, responder: Responder) -> None:
        handler = self._handlers.get(request.command)
        if handler is None:
            logger.warning("No handler for command %r", request.command)
            failure = UnknownFailure({"command": request.command})
            await responder.respond(failure.user_message, ephemeral=True)
            return
        logger.debug("Dispatching %s for user %s", request.command, request.user_id)
        await handler(request, responder)
