"""Compose update polling, chat selection and delivery into one reminder."""

from __future__ import annotations

import logging

from pingbot.errors import ResolutionError, TransportError
from pingbot.models import PingResult
from pingbot.resolver import select_chat
from pingbot.telegram.client import TelegramClient

LOGGER = logging.getLogger(__name__)


class Pinger:
    """Sends a reminder to the most recently active chat."""

    def __init__(self, client: TelegramClient) -> None:
        self._client = client

    async def post_reminder(self, text: str) -> PingResult:
        """Deliver ``text`` once; failures are logged and returned, never raised."""

        LOGGER.info("Requesting for updates.")
        try:
            updates = await self._client.get_updates()
        except TransportError as exc:
            LOGGER.warning("Could not get updates (%s). Error: %s", exc.stage, exc)
            return PingResult(delivered=False, error=str(exc))

        try:
            chat_id = select_chat(updates)
        except ResolutionError as exc:
            LOGGER.warning("Could not pick a chat. Error: %s", exc)
            return PingResult(delivered=False, error=str(exc))

        LOGGER.info("Sending message to chat %s: %s", chat_id, text)
        try:
            await self._client.send_message(chat_id, text)
        except TransportError as exc:
            LOGGER.warning("Failed sending message. Error: %s", exc)
            return PingResult(delivered=False, chat_id=chat_id, error=str(exc))

        return PingResult(delivered=True, chat_id=chat_id)
