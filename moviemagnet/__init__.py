"""MovieMagnet: a Telegram bot serving random movie picks from MongoDB."""

__version__ = "1.0.0"
