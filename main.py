"""
main.py
-------
Entry point for the Solana Telegram bot.

Responsibilities:
    - Validate configuration.
    - Build the Telegram application and its shared services.
    - Consume updates via long polling until the stop event is set.
"""

import asyncio
import signal
import sys

from telegram import BotCommand
from telegram.ext import Application, MessageHandler, filters

import config
from handlers.dispatcher import dispatch_message, error_handler
from rpc.solana_client import SolanaRpcClient
from services.balance_service import BalanceService
from services.session_manager import SessionManager
from utils.logger import get_logger

logger = get_logger(__name__)

BOT_COMMANDS = [
    BotCommand("start", "Start the bot"),
    BotCommand("create_account", "Create a new Solana account"),
    BotCommand("fund_account", "Fund a Solana account"),
    BotCommand("check_balance", "Check Solana account balance"),
    BotCommand("list_tokens", "List tokens in a Solana account"),
    BotCommand("help", "Show help message"),
]


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    await application.bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str, rpc: SolanaRpcClient) -> Application:
    """
    Build the Telegram application with its handlers and shared state.

    Updates are processed one at a time, which is what keeps the
    session map safe without locking.
    """
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(False)
        .build()
    )
    app.bot_data["sessions"] = SessionManager()
    app.bot_data["balance_service"] = BalanceService(rpc)

    # Commands are matched by the dispatcher, not by CommandHandler.
    app.add_handler(MessageHandler(filters.TEXT, dispatch_message))
    app.add_error_handler(error_handler)
    return app


async def run(stop_event: asyncio.Event) -> None:
    """
    Poll for updates until `stop_event` is set, then shut down cleanly.

    Args:
        stop_event: Cancellation token; setting it ends the consumption loop.
    """
    rpc = SolanaRpcClient(config.SOLANA_RPC_ENDPOINT)
    app = build_application(config.TELEGRAM_TOKEN, rpc)

    try:
        async with app:
            await set_bot_commands(app)
            await app.start()
            try:
                await app.updater.start_polling(allowed_updates=["message"])
                logger.info("Solana bot is running! Press Ctrl+C to stop.")

                await stop_event.wait()
                logger.info("Stop requested, shutting down...")
            finally:
                # shutdown() refuses to run while either is still running.
                if app.updater.running:
                    await app.updater.stop()
                if app.running:
                    await app.stop()
    finally:
        app.bot_data["sessions"].clear()
        await rpc.close()
        logger.info("Solana bot stopped.")


def main() -> None:
    """Initialize and run the bot."""
    try:
        config.validate_settings()
    except config.ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    async def _runner() -> None:
        stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, stop_event.set)
            except NotImplementedError:
                # Windows event loops have no signal handler support.
                signal.signal(sig, lambda *_: loop.call_soon_threadsafe(stop_event.set))
        await run(stop_event)

    asyncio.run(_runner())


if __name__ == "__main__":
    main()
