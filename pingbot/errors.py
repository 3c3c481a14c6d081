"""Exception hierarchy for the ping bot."""

from __future__ import annotations


class PingBotError(Exception):
    """Base exception for all ping bot errors."""


class ConfigError(PingBotError):
    """Missing or invalid startup configuration. Fatal."""


class TransportError(PingBotError):
    """A Telegram Bot API call failed.

    ``stage`` names where it failed: ``network``, ``http``, ``decode`` or
    ``platform``. Platform failures carry the ``error_code`` and
    ``description`` Telegram reported.
    """

    def __init__(
        self,
        stage: str,
        message: str,
        error_code: int | None = None,
        description: str | None = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.error_code = error_code
        self.description = description


class ResolutionError(PingBotError):
    """No chat could be picked from the fetched updates."""


class InputError(PingBotError):
    """The name list file could not be read or parsed."""
