"""
services/balance_service.py
----------------------------
Business logic for balance lookups.
Validates the user's input, calls the RPC layer and formats the reply.
"""

from rpc.solana_client import RpcError, SolanaRpcClient
from utils.logger import get_logger

logger = get_logger(__name__)

EMPTY_KEY_MESSAGE = "Public key cannot be empty. Please try again with a valid key."


class BalanceService:
    """Looks up account balances on behalf of a chat."""

    def __init__(self, rpc: SolanaRpcClient):
        self.rpc = rpc

    async def check_balance(self, public_key: str) -> str:
        """
        Look up the balance for a user-supplied public key.

        Args:
            public_key: Raw message text, expected to be a base58 address.

        Returns:
            The reply to send back: either the balance in lamports,
            the empty-key warning, or the RPC error forwarded verbatim.
        """
        public_key = public_key.strip()
        if not public_key:
            return EMPTY_KEY_MESSAGE

        try:
            balance = await self.rpc.get_balance(public_key)
        except RpcError as e:
            logger.warning(f"Balance lookup failed for {public_key}: {e}")
            return f"Failed to get balance: {e}"

        logger.info(f"Balance for {public_key}: {balance} lamports")
        return f"Balance for account {public_key}: {balance} lamports"
