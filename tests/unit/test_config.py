"""Unit tests for settings loading."""

import pytest

from moviemagnet.core.config import load_settings
from moviemagnet.core.exceptions import ConfigMissing


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("BOT_API_TOKEN", "MONGO_URI", "MONGO_DATABASE", "MONGO_COLLECTION"):
        monkeypatch.delenv(key, raising=False)


class TestLoadSettings:
    """Tests for environment-driven configuration."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "123:abc")
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/films")
        settings = load_settings(_env_file=None)
        assert settings.bot_api_token == "123:abc"
        assert settings.mongo_uri == "mongodb://localhost:27017/films"
        assert settings.mongo_collection == "movies"
        assert settings.mongo_database == "moviemagnet"

    def test_missing_token(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
        with pytest.raises(ConfigMissing) as exc_info:
            load_settings(_env_file=None)
        assert "bot_api_token" in str(exc_info.value)

    def test_missing_mongo_uri(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "123:abc")
        with pytest.raises(ConfigMissing) as exc_info:
            load_settings(_env_file=None)
        assert "mongo_uri" in str(exc_info.value)

    def test_blank_token(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "   ")
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
        with pytest.raises(ConfigMissing):
            load_settings(_env_file=None)

    def test_placeholder_token(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "your_bot_token_here")
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
        with pytest.raises(ConfigMissing):
            load_settings(_env_file=None)

    def test_not_a_mongo_uri(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "123:abc")
        monkeypatch.setenv("MONGO_URI", "postgres://localhost/films")
        with pytest.raises(ConfigMissing):
            load_settings(_env_file=None)
