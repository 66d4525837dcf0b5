from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from moviemagnet.core.constants import (
    DEFAULT_MIN_RATING,
    DEFAULT_MIN_YEAR,
    GENRES_FIELD,
    RANDOM_SAMPLE_SIZE,
)
from moviemagnet.db.session import MovieSession


@dataclass(frozen=True)
class MovieFilter:
    # string comparison against string-typed fields: "10" < "7"
    min_rating: str = DEFAULT_MIN_RATING
    min_year: str = DEFAULT_MIN_YEAR

    def to_match(self) -> dict[str, Any]:
        return {
            "rating": {"$gt": self.min_rating},
            "year": {"$gte": self.min_year},
        }


DEFAULT_FILTER = MovieFilter()


def random_pick_pipeline(match: dict[str, Any]) -> list[dict[str, Any]]:
    return [
        {"$match": match},
        {"$sample": {"size": RANDOM_SAMPLE_SIZE}},
    ]


async def _sample_one(session: MovieSession, match: dict[str, Any]) -> dict[str, Any] | None:
    cursor = await session.collection.aggregate(
        random_pick_pipeline(match),
        session=session.client_session,
    )
    docs = await cursor.to_list(length=RANDOM_SAMPLE_SIZE)
    return docs[0] if docs else None


async def fetch_random_movie(
    session: MovieSession,
    filters: MovieFilter = DEFAULT_FILTER,
) -> dict[str, Any] | None:
    """Uniformly random movie matching the filter, or None."""
    return await _sample_one(session, filters.to_match())


async def fetch_random_movie_by_genre(
    session: MovieSession,
    genre: str,
    filters: MovieFilter = DEFAULT_FILTER,
) -> dict[str, Any] | None:
    """
    Same as fetch_random_movie, restricted to movies with a genre tag that
    matches `genre` case-insensitively as a pattern ("com" finds "comedy").
    """
    match = {GENRES_FIELD: {"$regex": genre, "$options": "i"}}
    match.update(filters.to_match())
    return await _sample_one(session, match)


async def list_distinct_genres(session: MovieSession) -> list[str]:
    """Distinct genre tags in store order."""
    return list(await session.collection.distinct(GENRES_FIELD, session=session.client_session))
