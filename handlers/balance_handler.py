"""
handlers/balance_handler.py
----------------------------
Handles balance and token related interactions.

/check_balance arms the chat's session; the next message is then routed
to `handle_public_key` by the dispatcher.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.balance_service import BalanceService
from services.session_manager import SessionManager
from utils.logger import get_logger

logger = get_logger(__name__)

CHECK_BALANCE_PROMPT = "Please reply with the Solana public key to check balance."
LIST_TOKENS_PROMPT = "Please reply with the Solana public key to list tokens."


async def check_balance_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /check_balance command - ask for a public key and wait for it."""
    sessions: SessionManager = context.bot_data["sessions"]
    await update.message.reply_text(CHECK_BALANCE_PROMPT)
    sessions.request_public_key(update.effective_chat.id)


async def list_tokens_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /list_tokens command.

    Token-account enumeration is not implemented: the prompt is sent but
    the session is not armed, so the reply is dispatched as a command.
    """
    await update.message.reply_text(LIST_TOKENS_PROMPT)


async def handle_public_key(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Treat the message text as a public key and reply with its balance."""
    balance_service: BalanceService = context.bot_data["balance_service"]
    reply = await balance_service.check_balance(update.message.text)
    await update.message.reply_text(reply)
