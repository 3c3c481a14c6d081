"""Telegram Bot API payload contracts.

Only the subset of fields the bot reads is modelled; unknown fields are
ignored so new Bot API additions do not break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _TelegramModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class User(_TelegramModel):
    id: int
    first_name: str = ""
    last_name: str | None = None
    username: str | None = None


class Chat(_TelegramModel):
    """Conversation a message belongs to. Only ``id`` is needed to reply."""

    id: int
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class MessageEntity(_TelegramModel):
    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None


class Message(_TelegramModel):
    message_id: int
    from_user: User | None = Field(default=None, alias="from")
    date: int
    chat: Chat
    text: str | None = None
    entities: list[MessageEntity] = Field(default_factory=list)


class Update(_TelegramModel):
    """One inbound event from ``getUpdates``."""

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None
    channel_post: Message | None = None

    @property
    def chat(self) -> Chat | None:
        for payload in (self.message, self.edited_message, self.channel_post):
            if payload is not None:
                return payload.chat
        return None


class UpdatesResponse(_TelegramModel):
    """Envelope returned by ``getUpdates``."""

    ok: bool
    result: list[Update] = Field(default_factory=list)
    error_code: int | None = None
    description: str | None = None


class SendMessageResponse(_TelegramModel):
    """Envelope returned by ``sendMessage``."""

    ok: bool
    result: Message | None = None
    error_code: int | None = None
    description: str | None = None
