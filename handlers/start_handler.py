"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = "Welcome to Solana Bot! Use /create_account to create a new account."

HELP_TEXT = (
    "Available commands:\n"
    "/create_account - Create a new Solana account\n"
    "/fund_account - Fund a Solana account\n"
    "/check_balance - Check Solana account balance\n"
    "/list_tokens - List tokens in a Solana account\n"
    "/help - Show this help message"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome message."""
    logger.info(f"Chat {update.effective_chat.id} started the bot.")
    await update.message.reply_text(WELCOME_TEXT)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - show all available commands."""
    await update.message.reply_text(HELP_TEXT)
