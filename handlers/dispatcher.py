"""
handlers/dispatcher.py
-----------------------
Single entry point for every text message.

A chat that is awaiting a public key gets its next message routed to the
balance lookup, whatever the text. Everything else is matched verbatim
against the command table.
"""

from typing import Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from handlers.account_handler import create_account_command, fund_account_command
from handlers.balance_handler import (
    check_balance_command,
    handle_public_key,
    list_tokens_command,
)
from handlers.start_handler import help_command, start_command
from services.session_manager import SessionManager
from utils.logger import get_logger

logger = get_logger(__name__)

Handler = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]

INVALID_COMMAND_TEXT = "Invalid command"

COMMANDS: dict[str, Handler] = {
    "/start": start_command,
    "/create_account": create_account_command,
    "/fund_account": fund_account_command,
    "/check_balance": check_balance_command,
    "/list_tokens": list_tokens_command,
    "/help": help_command,
}


async def dispatch_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Route a text message to the pending balance lookup or a command handler."""
    message = update.message
    if message is None or not message.text:
        return

    text = message.text
    chat_id = update.effective_chat.id
    logger.info(f"Received command: {text}")

    sessions: SessionManager = context.bot_data["sessions"]
    if sessions.consume_pending(chat_id):
        await handle_public_key(update, context)
        return

    handler = COMMANDS.get(text)
    if handler is None:
        await message.reply_text(INVALID_COMMAND_TEXT)
        return
    await handler(update, context)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised while processing an update and keep polling."""
    logger.error(f"Error while handling update {update}: {context.error}", exc_info=context.error)
