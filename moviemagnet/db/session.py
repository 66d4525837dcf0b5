"""Process-wide MongoDB client and per-query session checkout."""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncGenerator

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from moviemagnet.core.config import Settings
from moviemagnet.core.exceptions import StoreUnavailable


@dataclass(frozen=True)
class MovieSession:
    """A movies collection handle bound to one checked-out client session."""

    collection: Any
    client_session: Any = None


class MovieStore:
    """
    Owns the long-lived client (and its connection pool).

    Usage:
        async with store.session() as session:
            movie = await fetch_random_movie(session)
    """

    def __init__(self, client: Any, collection: Any):
        self._client = client
        self._collection = collection

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[MovieSession, None]:
        """
        Check out a client session for a single logical query.

        Yields:
            MovieSession: Collection plus the client session to pass to it

        Raises:
            StoreUnavailable: If the session cannot be started or a query fails
        """
        try:
            async with self._client.start_session() as client_session:
                yield MovieSession(self._collection, client_session)
        except PyMongoError as e:
            raise StoreUnavailable(f"Movie store operation failed: {e}") from e

    async def ping(self) -> None:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            raise StoreUnavailable(f"Movie store is unreachable: {e}") from e

    async def close(self) -> None:
        await self._client.close()


def create_movie_store(settings: Settings) -> MovieStore:
    client = AsyncMongoClient(
        settings.mongo_uri,
        maxPoolSize=settings.mongo_max_pool_size,  # shared by all handlers
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )
    database = client.get_default_database(default=settings.mongo_database)
    return MovieStore(client, database[settings.mongo_collection])
