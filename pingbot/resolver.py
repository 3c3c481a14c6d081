"""Pick the chat the reminder goes to."""

from __future__ import annotations

from typing import Sequence

from pingbot.errors import ResolutionError
from pingbot.telegram.models import Update


def select_chat(updates: Sequence[Update]) -> int:
    """Return the chat id of the most recent update.

    The last element wins; there is no ranking or deduplication, so the bot
    always replies to whoever messaged it last.
    """

    if not updates:
        raise ResolutionError("No updates received, nobody to ping")
    last = updates[-1]
    chat = last.chat
    if chat is None:
        raise ResolutionError(f"Update {last.update_id} carries no chat")
    return chat.id
