"""
Movie document -> outbound Telegram payload.

Pure formatting: no I/O and no hidden state, so the same document always
produces the same presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from moviemagnet.core.constants import GENRE_SEPARATOR, SUMMARY_ELLIPSIS, SUMMARY_MAX_LENGTH
from moviemagnet.db.models import Actor, Movie


@dataclass(frozen=True)
class LinkButton:
    label: str
    url: str


@dataclass(frozen=True)
class MoviePresentation:
    caption: str
    photo_url: str
    buttons: tuple[tuple[LinkButton, ...], ...]


def truncate_summary(summary: str) -> str:
    if len(summary) > SUMMARY_MAX_LENGTH:
        return summary[:SUMMARY_MAX_LENGTH] + SUMMARY_ELLIPSIS
    return summary


def format_actors(actors: list[Actor]) -> str:
    return "\n".join(f"{a.name} as {a.role}" for a in actors)


def format_caption(movie: Movie) -> str:
    # legacy Telegram Markdown; empty sections keep their header
    trailer = f"[🎬 Watch Trailer]({movie.trailer_link})"
    return (
        "\n"
        f"🎬 *Title:*      *{movie.title}*\n\n"
        f"⭐️ *Rating:* {movie.rating}\n"
        f"📅 *Year:* {movie.year}\n"
        f"🎭 *Genres:* {GENRE_SEPARATOR.join(movie.genres)}\n"
        f"👤 *Actors:*\n"
        f"{format_actors(movie.actors)}\n\n"
        f"📝 *Description:* {truncate_summary(movie.summary)}\n\n"
        f"[{trailer}]\n"
    )


def download_buttons(movie: Movie) -> tuple[tuple[LinkButton, ...], ...]:
    """One row per download entry, one button per row."""
    return tuple((LinkButton(label=d.quality, url=d.link),) for d in movie.download)


def present_movie(document: Mapping[str, Any] | Movie) -> MoviePresentation:
    """
    Raises:
        MalformedRecord: If genres, actors or download is missing
    """
    movie = document if isinstance(document, Movie) else Movie.from_document(document)
    return MoviePresentation(
        caption=format_caption(movie),
        photo_url=movie.image_url,
        buttons=download_buttons(movie),
    )
