"""Deliver a Firecrawl result either inline or as a JSON file attachment."""

from __future__ import annotations

import json
import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from firecrawl_bot.utils import jsonify

if TYPE_CHECKING:
    from firecrawl_bot.responder import Responder

logger = logging.getLogger(__name__)

INLINE_RESPONSE_LIMIT = 1900
ATTACHMENT_MESSAGE = "📎 The response was too large to display directly. Please find it attached below:"


@dataclass(frozen=True)
class Attachment:
    path: Path
    filename: str


def encode_result(result: Any) -> str:
    return json.dumps(jsonify(result), ensure_ascii=False, indent=2)


def write_attachment(content: str, command: str, directory: Optional[str] = None) -> Attachment:
    """Write content to a new temp file. The file is left for the OS to clean up."""
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        prefix=f"{command}-response-",
        suffix=".json",
        dir=directory,
        delete=False,
    ) as fh:
        fh.write(content)
    return Attachment(path=Path(fh.name), filename=f"{command}-response.json")


async def deliver_result(
    responder: "Responder",
    command: str,
    result: Any,
    *,
    limit: int = INLINE_RESPONSE_LIMIT,
    directory: Optional[str] = None,
) -> None:
    """Send a result as a ```json block if it fits under `limit`, else as a file."""
    encoded = encode_result(result)
    if len(encoded) < limit:
        await responder.respond(f"```json\n{encoded}\n```")
        return

    attachment = write_attachment(encoded, command, directory)
    logger.info("%s response is %d chars, sending %s", command, len(encoded), attachment.path)
    await responder.respond(ATTACHMENT_MESSAGE, attachment=attachment)
