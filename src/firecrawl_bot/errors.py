"""
Exceptions raised while handling a bot command.

Every command failure is a BotError carrying the text shown to the user.
`handle_command_errors` turns them into replies, so none of them escape an
interaction.
"""

from __future__ import annotations

from typing import Any, Optional

GENERIC_FAILURE_MESSAGE = "⚠️ An error occurred while processing your command. Please try again."


class BotError(Exception):
    """Base exception for all bot errors."""

    ephemeral = True

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def user_message(self) -> str:
        return self.message

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigError(BotError):
    """Required startup configuration is missing."""


# =============================================================================
# Credential errors
# =============================================================================


class CredentialMissing(BotError):
    def __init__(self, user_id: str) -> None:
        super().__init__(
            "You must add your API key before using these commands. "
            "To do that, use /set-api-key key value.",
            {"user_id": user_id},
        )


class CredentialAlreadySet(BotError):
    def __init__(self, user_id: str) -> None:
        super().__init__(
            "You already have an API key set. Use /update-api-key to change it.",
            {"user_id": user_id},
        )


# =============================================================================
# Parameter errors
# =============================================================================


class InvalidFormat(BotError):
    """The params argument is not a JSON object."""

    def __init__(
        self,
        message: str = "Invalid JSON format. Please check your input.",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)


class InvalidParameterValue(InvalidFormat):
    """A known parameter has a value of the wrong type."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f'Invalid value for the "{field}" parameter: {reason}', {"field": field})
        self.field = field


class UnsupportedParameters(BotError):
    def __init__(self, command: str, params: list[str]) -> None:
        listed = "`, `".join(params)
        super().__init__(
            f"⚠️ The following parameters are not supported in the bot yet: `{listed}`",
            {"command": command, "params": params},
        )
        self.params = params


class MissingRequiredField(BotError):
    def __init__(self, command: str, field: str, message: str) -> None:
        super().__init__(message, {"command": command, "field": field})
        self.field = field


# =============================================================================
# Execution errors
# =============================================================================


class RemoteCallFailed(BotError):
    """The Firecrawl API call raised. Detail stays in the logs."""

    ephemeral = False

    def __init__(self, command: str) -> None:
        super().__init__(
            f"⚠️ Error executing {command} command. Please check your parameters and try again.",
            {"command": command},
        )
        self.command = command


class UnknownFailure(BotError):
    def __init__(self, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(GENERIC_FAILURE_MESSAGE, details)
