from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable

from ..delivery import deliver_result
from ..errors import RemoteCallFailed
from ..utils import handle_command_errors
from .params import parse_params

if TYPE_CHECKING:
    from ..responder import Responder
    from ..router import CommandRequest, CommandRouter


def register(router: CommandRouter) -> None:
    """Register the Firecrawl commands: scrape, map and extract.

    All three follow the same path. Key check, params validation (both answered
    immediately on failure), then a deferred reply while the API call runs.
    """

    async def _run(request: CommandRequest, responder: Responder, call: Callable[..., Awaitable[Any]]) -> None:
        api_key = router.require_key(request.user_id)
        params = parse_params(request.command, request.argument)

        await responder.defer()
        try:
            result = await call(api_key, params)
        except Exception as e:
            raise RemoteCallFailed(request.command) from e

        await deliver_result(
            responder,
            request.command,
            result,
            limit=router.settings.INLINE_RESPONSE_LIMIT,
            directory=router.settings.RESPONSE_TMP_DIR,
        )

    @router.command("scrape")
    @handle_command_errors
    async def scrape(request: CommandRequest, responder: Responder) -> None:
        await _run(request, responder, router.gateway.scrape)

    @router.command("map")
    @handle_command_errors
    async def map_urls(request: CommandRequest, responder: Responder) -> None:
        await _run(request, responder, router.gateway.map)

    @router.command("extract")
    @handle_command_errors
    async def extract(request: CommandRequest, responder: Responder) -> None:
        await _run(request, responder, router.gateway.extract)
