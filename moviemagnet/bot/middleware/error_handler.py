"""Bot middleware for error handling."""

import logging
from typing import Any, Awaitable, Callable

from aiogram import BaseMiddleware
from aiogram.types import Message, TelegramObject

from moviemagnet.bot.safe_send import safe_answer
from moviemagnet.core.constants import GENERIC_ERROR_MESSAGE
from moviemagnet.core.exceptions import MovieMagnetError, TransportFailure

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseMiddleware):
    """
    Middleware to handle errors globally in the bot.

    Logs all errors. Users only ever see the generic apology text, and
    nothing at all when the failure was in sending itself.
    """

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        try:
            return await handler(event, data)
        except TransportFailure as e:
            logger.warning(f"Transport failure (chat_id={e.chat_id}): {e}", exc_info=True)
        except MovieMagnetError as e:
            logger.error(f"Application error: {e}", exc_info=True)
            await self._apologize(event)
        except Exception as e:
            logger.error(f"Unexpected error: {e}", exc_info=True)
            await self._apologize(event)

    async def _apologize(self, event: TelegramObject) -> None:
        if not isinstance(event, Message):
            return
        try:
            await safe_answer(event, GENERIC_ERROR_MESSAGE)
        except TransportFailure as e:
            logger.warning(f"Could not deliver error message: {e}")
