import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.session.aiohttp import AiohttpSession

from moviemagnet.bot.middleware import ErrorHandlerMiddleware
from moviemagnet.bot.router import router
from moviemagnet.core.config import Settings, load_settings
from moviemagnet.core.exceptions import ConfigMissing, StoreUnavailable
from moviemagnet.core.instance import InstanceLock
from moviemagnet.core.logging import setup_logging
from moviemagnet.db.session import create_movie_store

logger = logging.getLogger(__name__)


def build_dispatcher() -> Dispatcher:
    dp = Dispatcher()

    # Add error handler middleware
    dp.message.middleware(ErrorHandlerMiddleware())

    dp.include_router(router)
    return dp


async def main(settings: Settings) -> None:
    logger.info("Starting MovieMagnet bot...")

    store = create_movie_store(settings)
    try:
        await store.ping()
        logger.info("Connected to MongoDB")

        session = AiohttpSession(timeout=60)
        bot = Bot(token=settings.bot_api_token, session=session)
        dp = build_dispatcher()

        try:
            await bot.delete_webhook()
            logger.info("Bot is running. Polling for updates...")
            await dp.start_polling(bot, movie_store=store)
        finally:
            await bot.session.close()
    finally:
        await store.close()


def run() -> int:
    setup_logging()

    try:
        settings = load_settings()
    except ConfigMissing as e:
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(settings.log_level)

    with InstanceLock(settings.instance_lock_path) as lock:
        if not lock.acquire():
            return 0

        try:
            asyncio.run(main(settings))
        except KeyboardInterrupt:
            logger.info("Bot stopped by user")
        except StoreUnavailable as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            return 1
        except Exception as e:
            logger.error(f"Fatal error: {e}", exc_info=True)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
