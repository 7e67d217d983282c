"""Reply handling for a single interaction.

A Discord interaction accepts exactly one initial response. After that, content
goes through an edit (if the response was a deferral) or a follow-up. The
responder tracks which of the three states the interaction is in, so handlers
call `respond` without caring about timing.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import discord

from firecrawl_bot.delivery import Attachment


class AckState(str, Enum):
    PENDING = "pending"
    DEFERRED = "deferred"
    REPLIED = "replied"


class Responder:
    """Acknowledgment token for one interaction.

    Subclasses implement the four platform calls. `defer` and `respond` pick
    the right one from `state`.
    """

    def __init__(self) -> None:
        self.state = AckState.PENDING

    async def defer(self) -> None:
        """Send a "processing" acknowledgment. No-op unless nothing was sent yet."""
        if self.state is not AckState.PENDING:
            return
        await self._defer()
        self.state = AckState.DEFERRED

    async def respond(
        self,
        content: str,
        *,
        ephemeral: bool = False,
        attachment: Optional[Attachment] = None,
    ) -> None:
        if self.state is AckState.PENDING:
            await self._send(content, ephemeral=ephemeral, attachment=attachment)
        elif self.state is AckState.DEFERRED:
            # ephemerality was fixed by the deferral
            await self._edit(content, attachment=attachment)
        else:
            await self._followup(content, ephemeral=ephemeral, attachment=attachment)
        self.state = AckState.REPLIED

    async def _defer(self) -> None:
        raise NotImplementedError

    async def _send(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        raise NotImplementedError

    async def _edit(self, content: str, *, attachment: Optional[Attachment]) -> None:
        raise NotImplementedError

    async def _followup(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        raise NotImplementedError


def _to_file(attachment: Attachment) -> discord.File:
    return discord.File(str(attachment.path), filename=attachment.filename)


class DiscordResponder(Responder):
    def __init__(self, interaction: discord.Interaction) -> None:
        super().__init__()
        self._interaction = interaction

    async def _defer(self) -> None:
        await self._interaction.response.defer(thinking=True)

    async def _send(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        kwargs: dict[str, Any] = {"ephemeral": ephemeral}
        if attachment is not None:
            kwargs["file"] = _to_file(attachment)
        await self._interaction.response.send_message(content, **kwargs)

    async def _edit(self, content: str, *, attachment: Optional[Attachment]) -> None:
        kwargs: dict[str, Any] = {"content": content}
        if attachment is not None:
            kwargs["attachments"] = [_to_file(attachment)]
        await self._interaction.edit_original_response(**kwargs)

    async def _followup(self, content: str, *, ephemeral: bool, attachment: Optional[Attachment]) -> None:
        kwargs: dict[str, Any] = {"ephemeral": ephemeral}
        if attachment is not None:
            kwargs["file"] = _to_file(attachment)
        await self._interaction.followup.send(content, **kwargs)
