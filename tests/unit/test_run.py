"""Unit tests for the process entrypoint."""

import logging

import pytest
from pymongo.errors import ServerSelectionTimeoutError

import moviemagnet.bot.run as bot_run
from moviemagnet.core.config import Settings
from moviemagnet.core.exceptions import StoreUnavailable
from moviemagnet.core.instance import InstanceLock
from moviemagnet.db.session import MovieStore
from tests.fakes.mongo import FakeCollection, FakeMongoClient


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    # no stray .env, no real lock file, root level restored afterwards
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INSTANCE_LOCK_PATH", str(tmp_path / "bot.lock"))
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture()
def started(monkeypatch) -> list:
    calls = []

    def fake_run(coro):
        coro.close()
        calls.append(coro)

    monkeypatch.setattr(bot_run.asyncio, "run", fake_run)
    return calls


class TestRunExitCodes:
    """Process-level exit codes."""

    def test_missing_config_exits_1(self, monkeypatch, started):
        monkeypatch.delenv("BOT_API_TOKEN", raising=False)
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
        assert bot_run.run() == 1
        assert started == []

    def test_already_running_exits_0(self, monkeypatch, tmp_path, started):
        monkeypatch.setenv("BOT_API_TOKEN", "123:abc")
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")

        with InstanceLock(str(tmp_path / "bot.lock")) as other:
            assert other.acquire()
            assert bot_run.run() == 0
        assert started == []

    def test_unreachable_store_exits_1(self, monkeypatch):
        monkeypatch.setenv("BOT_API_TOKEN", "123:abc")
        monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")

        def fail(coro):
            coro.close()
            raise StoreUnavailable("Movie store is unreachable")

        monkeypatch.setattr(bot_run.asyncio, "run", fail)
        assert bot_run.run() == 1

    def test_log_level_comes_from_settings(self, monkeypatch, tmp_path, started):
        # only Settings reads .env; the pre-settings setup sees INFO
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text(
            "BOT_API_TOKEN=123:abc\nMONGO_URI=mongodb://localhost:27017\nLOG_LEVEL=debug\n"
        )

        assert bot_run.run() == 0
        assert len(started) == 1
        assert logging.getLogger().level == logging.DEBUG


@pytest.mark.asyncio
async def test_store_is_closed_when_ping_fails(monkeypatch):
    client = FakeMongoClient(ping_error=ServerSelectionTimeoutError("no servers"))
    monkeypatch.setattr(bot_run, "create_movie_store", lambda settings: MovieStore(client, FakeCollection()))
    settings = Settings(bot_api_token="123:abc", mongo_uri="mongodb://localhost:27017", _env_file=None)

    with pytest.raises(StoreUnavailable):
        await bot_run.main(settings)

    assert client.closed
