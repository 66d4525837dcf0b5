"""
Custom exception hierarchy for the MovieMagnet bot.

Every error carries an internal message for the logs and an optional
user-facing message. Handlers never show the internal message in chat.
"""

from moviemagnet.core.constants import GENERIC_ERROR_MESSAGE


class MovieMagnetError(Exception):
    """Base exception for all MovieMagnet errors."""

    def __init__(self, message: str, user_message: str | None = None):
        """
        Initialize exception.

        Args:
            message: Internal error message for logging
            user_message: User-friendly message for display (optional)
        """
        super().__init__(message)
        self.user_message = user_message or message


class ConfigMissing(MovieMagnetError):
    """Raised when required configuration is absent or invalid."""

    pass


class StoreUnavailable(MovieMagnetError):
    """Raised when the movie store cannot be reached or a query fails."""

    def __init__(self, message: str):
        super().__init__(message, user_message=GENERIC_ERROR_MESSAGE)


class MalformedRecord(MovieMagnetError):
    """Raised when a movie document lacks fields needed to present it."""

    def __init__(self, message: str, movie_id: object | None = None):
        super().__init__(message, user_message=GENERIC_ERROR_MESSAGE)
        self.movie_id = movie_id


class TransportFailure(MovieMagnetError):
    """Raised when an outbound Telegram send fails."""

    def __init__(self, message: str, chat_id: int | None = None):
        super().__init__(message)
        self.chat_id = chat_id
