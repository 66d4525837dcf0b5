import os
import tempfile

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from moviemagnet.core.constants import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_DATABASE_NAME,
    INSTANCE_LOCK_FILENAME,
)
from moviemagnet.core.exceptions import ConfigMissing


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    bot_api_token: str
    mongo_uri: str

    mongo_database: str = DEFAULT_DATABASE_NAME
    mongo_collection: str = DEFAULT_COLLECTION_NAME
    mongo_max_pool_size: int = 20
    mongo_server_selection_timeout_ms: int = 10000

    log_level: str = "INFO"

    instance_lock_path: str = os.path.join(tempfile.gettempdir(), INSTANCE_LOCK_FILENAME)

    @field_validator("bot_api_token", "mongo_uri")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @model_validator(mode="after")
    def validate_placeholders(self) -> "Settings":
        """Reject values copied verbatim from an example .env."""
        if self.bot_api_token in ("your_bot_token_here", "test_token"):
            raise ValueError(
                "BOT_API_TOKEN is not properly configured. "
                "Create a bot with @BotFather on Telegram"
            )
        if not self.mongo_uri.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("MONGO_URI must be a mongodb:// or mongodb+srv:// connection string")
        return self


def load_settings(**overrides) -> Settings:
    """
    Build settings from the environment (and .env).

    Raises:
        ConfigMissing: If a required value is absent or invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "settings" for err in e.errors()
        )
        raise ConfigMissing(f"Invalid or missing configuration: {fields}") from e
