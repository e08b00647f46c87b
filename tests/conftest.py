"""
Shared fixtures: fake Telegram updates and a context carrying the bot's
shared services, with the RPC layer mocked out.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from handlers.dispatcher import dispatch_message
from rpc.solana_client import SolanaRpcClient
from services.balance_service import BalanceService
from services.session_manager import SessionManager


@pytest.fixture
def make_update():
    """Factory for a minimal Update-like mock carrying a text message."""
    def _make(text, chat_id=1001):
        update = MagicMock()
        update.effective_chat.id = chat_id
        update.message.text = text
        update.message.reply_text = AsyncMock()
        return update
    return _make


@pytest.fixture
def rpc():
    client = MagicMock(spec=SolanaRpcClient)
    client.get_balance = AsyncMock(return_value=1_500_000_000)
    return client


@pytest.fixture
def context(rpc):
    ctx = MagicMock()
    ctx.bot_data = {
        "sessions": SessionManager(),
        "balance_service": BalanceService(rpc),
    }
    return ctx


@pytest.fixture
def send(context, make_update):
    """Dispatch one message and return the texts replied, in order."""
    def _send(text, chat_id=1001):
        update = make_update(text, chat_id)
        asyncio.run(dispatch_message(update, context))
        return [c.args[0] for c in update.message.reply_text.await_args_list]
    return _send
