"""Telegram Bot API transport client."""

from __future__ import annotations

import logging
import posixpath
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from pingbot.errors import ConfigError, TransportError
from pingbot.telegram.models import Message, SendMessageResponse, Update, UpdatesResponse

LOGGER = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.telegram.org/bot"

_EnvelopeT = TypeVar("_EnvelopeT", UpdatesResponse, SendMessageResponse)


class TelegramClient:
    """Thin async wrapper over the two Bot API methods the bot needs.

    Each call makes exactly one HTTP request. Failures are raised as
    :class:`TransportError` tagged with the stage that failed; there is no
    retry.
    """

    def __init__(
        self,
        token: str,
        webhook_url: str,
        api_base: str = DEFAULT_API_BASE,
        timeout_seconds: float = 10.0,
    ) -> None:
        token = (token or "").strip()
        if not token:
            raise ConfigError("Please set environment variable TOKEN")
        if "/" in token or any(ch.isspace() for ch in token):
            raise ConfigError("TOKEN must not contain '/' or whitespace")

        self._root_url = _parse_absolute_url(api_base + token, "bot API url")
        if not webhook_url:
            raise ConfigError("Please set environment variable WEBHOOK_URL")
        webhook = _parse_absolute_url(webhook_url, "WEBHOOK_URL")
        self._webhook_url = webhook.copy_with(path=posixpath.join(webhook.path or "/", token))
        self._timeout_seconds = timeout_seconds
        LOGGER.info("Telegram client initialized.")

    @property
    def webhook_url(self) -> httpx.URL:
        return self._webhook_url

    async def get_updates(self) -> list[Update]:
        """Return pending updates in the order Telegram reports them."""

        envelope = await self._call("getUpdates", {}, UpdatesResponse)
        return envelope.result

    async def send_message(self, chat_id: int, text: str) -> Message:
        """Send ``text`` to ``chat_id`` and return the delivered message."""

        envelope = await self._call("sendMessage", {"chat_id": chat_id, "text": text}, SendMessageResponse)
        if envelope.result is None:
            raise TransportError("decode", "sendMessage returned ok without a message")
        LOGGER.info("Message delivered to chat %s", chat_id)
        return envelope.result

    async def _call(self, method: str, params: dict[str, Any], model: type[_EnvelopeT]) -> _EnvelopeT:
        timeout = httpx.Timeout(self._timeout_seconds)
        async with httpx.AsyncClient(base_url=self._root_url, timeout=timeout) as client:
            try:
                response = await client.get(f"/{method}", params=params)
            except httpx.HTTPError as exc:
                raise TransportError("network", f"{method} request failed: {exc}") from exc

        try:
            envelope = model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            # Telegram answers most failures with a JSON envelope; anything else
            # on an error status is a plain HTTP failure.
            if response.status_code >= 400:
                raise TransportError("http", f"{method} returned HTTP {response.status_code}") from exc
            raise TransportError("decode", f"Could not decode {method} response: {exc}") from exc

        if not envelope.ok:
            raise TransportError(
                "platform",
                f"{method} failed. Error Code: {envelope.error_code}, Desc: {envelope.description}",
                error_code=envelope.error_code,
                description=envelope.description,
            )
        return envelope


def _parse_absolute_url(raw: str, label: str) -> httpx.URL:
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise ConfigError(f"Error parsing {label}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"{label} must be an absolute http(s) url")
    return url
