"""
handlers/account_handler.py
----------------------------
Handles /create_account and /fund_account.
Delegates all logic to AccountService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from services.account_service import AccountService

account_service = AccountService()


async def create_account_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /create_account command - generate and show a new keypair."""
    await update.message.reply_text(account_service.create_account())


async def fund_account_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /fund_account command - explain how to fund an account."""
    await update.message.reply_text(account_service.fund_instructions())
