from __future__ import annotations

import logging
from typing import Awaitable, Callable

from aiogram import Router
from aiogram.filters import CommandObject
from aiogram.enums import ParseMode
from aiogram.types import Message

from moviemagnet.bot.keyboards import download_keyboard
from moviemagnet.bot.parsing import BOT_COMMANDS, Command, CommandKind, command_from_object
from moviemagnet.bot.presenter import MoviePresentation, present_movie
from moviemagnet.bot.safe_send import safe_answer, safe_answer_photo
from moviemagnet.core.constants import (
    ABOUT_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    GENRES_HEADER,
    HELP_MESSAGE,
    NO_GENRE_MATCH_MESSAGE,
    START_MESSAGE_TEMPLATE,
    UNKNOWN_USERNAME,
)
from moviemagnet.core.exceptions import MalformedRecord, StoreUnavailable
from moviemagnet.db.repositories.movies import (
    fetch_random_movie,
    fetch_random_movie_by_genre,
    list_distinct_genres,
)
from moviemagnet.db.session import MovieStore

logger = logging.getLogger(__name__)
router = Router()

CommandHandler = Callable[[Message, Command, MovieStore], Awaitable[None]]


# -----------------------------
# Helpers
# -----------------------------

async def send_movie(message: Message, presentation: MoviePresentation) -> None:
    await safe_answer_photo(
        message,
        presentation.photo_url,
        caption=presentation.caption,
        parse_mode=ParseMode.MARKDOWN,
        reply_markup=download_keyboard(presentation.buttons),
    )


# -----------------------------
# Static commands
# -----------------------------

async def handle_start(message: Message, command: Command, store: MovieStore) -> None:
    username = command.username or UNKNOWN_USERNAME
    await safe_answer(message, START_MESSAGE_TEMPLATE.format(username=username))


async def handle_about(message: Message, command: Command, store: MovieStore) -> None:
    await safe_answer(message, ABOUT_MESSAGE)


async def handle_help(message: Message, command: Command, store: MovieStore) -> None:
    await safe_answer(message, HELP_MESSAGE, parse_mode=ParseMode.MARKDOWN)


# -----------------------------
# Store-backed commands
# -----------------------------

async def handle_random_movie(message: Message, command: Command, store: MovieStore) -> None:
    async with store.session() as session:
        document = await fetch_random_movie(session)

    if document is None:
        # nothing matched the default filter: stay silent
        logger.info("random movie: no document matched (chat_id=%s)", message.chat.id)
        return

    await send_movie(message, present_movie(document))


async def handle_display_genres(message: Message, command: Command, store: MovieStore) -> None:
    async with store.session() as session:
        genres = await list_distinct_genres(session)

    text = f"{GENRES_HEADER}\n\n" + "\n".join(genres)
    await safe_answer(message, text, parse_mode=ParseMode.MARKDOWN)


async def handle_genre_filter(message: Message, command: Command, store: MovieStore) -> None:
    async with store.session() as session:
        document = await fetch_random_movie_by_genre(session, command.genre or "")

    if document is None:
        await safe_answer(message, NO_GENRE_MATCH_MESSAGE)
        return

    await send_movie(message, present_movie(document))


async def handle_nothing(message: Message, command: Command, store: MovieStore) -> None:
    return None


COMMAND_HANDLERS: dict[CommandKind, CommandHandler] = {
    CommandKind.START: handle_start,
    CommandKind.ABOUT: handle_about,
    CommandKind.HELP: handle_help,
    CommandKind.RANDOM_MOVIE: handle_random_movie,
    CommandKind.DISPLAY_GENRES: handle_display_genres,
    CommandKind.GENRE_FILTER: handle_genre_filter,
}


async def dispatch(message: Message, command: Command | None, store: MovieStore) -> None:
    if command is None:
        return

    handler = COMMAND_HANDLERS.get(command.kind, handle_nothing)
    try:
        await handler(message, command, store)
    except (StoreUnavailable, MalformedRecord):
        logger.exception("command %s failed (chat_id=%s)", command.kind.value, message.chat.id)
        await safe_answer(message, GENERIC_ERROR_MESSAGE)


# -----------------------------
# Entry
# -----------------------------

@router.message(BOT_COMMANDS)
async def on_command(message: Message, command: CommandObject, movie_store: MovieStore) -> None:
    username = message.from_user.username if message.from_user else None
    await dispatch(message, command_from_object(command, username), movie_store)
