"""
rpc/solana_client.py
--------------------
Wraps solana-py's AsyncClient for the single RPC call the bot makes.

Responsibilities:
    - Parse base58 public keys.
    - Fetch account balances in lamports.
    - Turn every failure into an RpcError carrying a readable message.
"""

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey

from utils.logger import get_logger

logger = get_logger(__name__)


class RpcError(Exception):
    """Any failure while talking to the Solana RPC endpoint."""


class SolanaRpcClient:
    """Async Solana RPC client bound to a single endpoint."""

    def __init__(self, endpoint: str, client: AsyncClient | None = None):
        self.endpoint = endpoint
        self._client = client or AsyncClient(endpoint)

    async def get_balance(self, public_key: str) -> int:
        """
        Fetch the balance of an account.

        Args:
            public_key: Base58-encoded account address.

        Returns:
            Balance in lamports.

        Raises:
            RpcError: If the key is malformed or the RPC call fails.
        """
        try:
            pubkey = Pubkey.from_string(public_key)
        except ValueError as e:
            raise RpcError(f"invalid public key: {e}") from e

        try:
            response = await self._client.get_balance(pubkey)
        except Exception as e:
            logger.error(f"getBalance failed for {public_key}: {e}")
            raise RpcError(str(e) or type(e).__name__) from e

        value = getattr(response, "value", None)
        if value is None:
            raise RpcError(f"unexpected RPC response: {response}")
        return int(value)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._client.close()
        logger.info("Solana RPC client closed.")
