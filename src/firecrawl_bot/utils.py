"""Common utility helpers for the bot's command handlers."""
from __future__ import annotations

import functools
import logging
from typing import Any, Awaitable, Callable

from firecrawl_bot.errors import BotError, RemoteCallFailed, UnknownFailure

logger = logging.getLogger("firecrawl_bot")


# ---------------------------------------------------------------------------
# Decorator converting handler exceptions into user replies
# ---------------------------------------------------------------------------

def handle_command_errors(func: Callable[..., Awaitable[None]]) -> Callable[..., Awaitable[None]]:
    """Wrap a handler so every failure ends in exactly one reply to the user.

    The wrapped callable takes ``(request, responder)``. The responder decides
    whether the reply is a first response, an edit of a deferred one or a
    follow-up, so this works at any point of the handler.
    """

    @functools.wraps(func)
    async def wrapper(request, responder) -> None:
        try:
            await func(request, responder)
        except RemoteCallFailed as e:
            logger.error("Remote call failed in %s for user %s", request.command, request.user_id, exc_info=e.__cause__ or e)
            await responder.respond(e.user_message, ephemeral=e.ephemeral)
        except BotError as e:
            logger.info("Rejected %s for user %s: %s", request.command, request.user_id, e)
            await responder.respond(e.user_message, ephemeral=e.ephemeral)
        except Exception as e:
            logger.error("Unexpected error in %s: %s", request.command, e, exc_info=True)
            failure = UnknownFailure({"command": request.command})
            await responder.respond(failure.user_message, ephemeral=failure.ephemeral)

    return wrapper


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def jsonify(data: Any) -> Any:
    """Best-effort make data JSON serializable."""
    if isinstance(data, (str, int, float, bool)) or data is None:
        return data
    if isinstance(data, dict):
        return {str(k): jsonify(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [jsonify(i) for i in data]
    if hasattr(data, "model_dump"):
        return jsonify(data.model_dump(exclude_none=True))  # pydantic BaseModel
    return str(data)


def mask_key(api_key: str) -> str:
    """Return a log-safe form of an API key."""
    if len(api_key) <= 8:
        return "***"
    return f"{api_key[:5]}...{api_key[-2:]}"
