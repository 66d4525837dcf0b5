from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from aiogram.filters import Command as CommandFilter, CommandObject

from moviemagnet.core.constants import (
    CMD_ABOUT,
    CMD_DISPLAY_GENRES,
    CMD_GENRE,
    CMD_HELP,
    CMD_RANDOM_MOVIE,
    CMD_START,
)


class CommandKind(Enum):
    START = "start"
    ABOUT = "about"
    HELP = "help"
    RANDOM_MOVIE = "random_movie"
    DISPLAY_GENRES = "display_genres"
    GENRE_FILTER = "genre_filter"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    genre: str | None = None
    username: str | None = None


_NO_ARG_COMMANDS = {
    CMD_START: CommandKind.START,
    CMD_ABOUT: CommandKind.ABOUT,
    CMD_HELP: CommandKind.HELP,
    CMD_RANDOM_MOVIE: CommandKind.RANDOM_MOVIE,
    CMD_DISPLAY_GENRES: CommandKind.DISPLAY_GENRES,
}

# Case-sensitive; "/cmd@OtherBot" is rejected by checking the mention against bot.me()
BOT_COMMANDS = CommandFilter(*_NO_ARG_COMMANDS, CMD_GENRE)


def command_from_object(obj: CommandObject, username: str | None = None) -> Optional[Command]:
    """
    Supported:
    - /start /about /help /randommovie /displaygenres
    - /genre <genre>   (genre is lowercased, one line only)
    Anything else -> None (the bot stays silent).
    """
    if obj.command == CMD_GENRE:
        args = (obj.args or "").strip()
        # "/genre" without a genre, or spread over several lines, is not a genre query
        if not args or "\n" in args:
            return None
        return Command(CommandKind.GENRE_FILTER, genre=args.lower())

    kind = _NO_ARG_COMMANDS.get(obj.command)
    if kind is None:
        return None
    if kind is CommandKind.START:
        return Command(kind, username=username)
    return Command(kind)
