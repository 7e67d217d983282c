from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils import handle_command_errors

if TYPE_CHECKING:
    from ..responder import Responder
    from ..router import CommandRequest, CommandRouter


def register(router: CommandRouter) -> None:
    """Register the API key management commands."""

    @router.command("set-api-key")
    @handle_command_errors
    async def set_api_key(request: CommandRequest, responder: Responder) -> None:
        router.store.set(request.user_id, request.argument or "")
        await responder.respond("✅ API key set successfully!", ephemeral=True)

    @router.command("update-api-key")
    @handle_command_errors
    async def update_api_key(request: CommandRequest, responder: Responder) -> None:
        router.store.update(request.user_id, request.argument or "")
        await responder.respond("✅ API key updated successfully!", ephemeral=True)
