from __future__ import annotations

import logging

from aiogram.exceptions import TelegramAPIError

from moviemagnet.core.exceptions import TransportFailure

logger = logging.getLogger(__name__)


def _chat_id(message) -> int | None:
    chat = getattr(message, "chat", None)
    return getattr(chat, "id", None)


async def safe_answer(message, text: str, **kwargs) -> None:
    """
    Send a text reply.
    - single attempt, no retries
    - any Telegram failure becomes TransportFailure
    """
    try:
        await message.answer(text, **kwargs)
    except TelegramAPIError as e:
        raise TransportFailure(f"sendMessage failed: {e}", chat_id=_chat_id(message)) from e


async def safe_answer_photo(message, photo: str, **kwargs) -> None:
    """Send a photo reply. Same failure policy as safe_answer."""
    try:
        await message.answer_photo(photo=photo, **kwargs)
    except TelegramAPIError as e:
        raise TransportFailure(f"sendPhoto failed: {e}", chat_id=_chat_id(message)) from e
