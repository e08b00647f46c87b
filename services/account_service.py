"""
services/account_service.py
----------------------------
Business logic for creating and funding Solana accounts.
"""

from models.account import Account
from utils.logger import get_logger

logger = get_logger(__name__)

FUND_INSTRUCTIONS = (
    "To fund your Solana account, send some SOL to a valid account address. "
    "Use /check_balance to verify the balance."
)


class AccountService:
    """Generates keypairs and explains how to fund them."""

    def create_account(self) -> str:
        """Generate a new keypair and format it for the user."""
        account = Account.generate()
        logger.info(f"Generated new account {account.public_key}")
        return (
            "New Solana account created:\n"
            f"Public Key: {account.public_key}\n"
            f"Private Key: {account.private_key_hex}"
        )

    def fund_instructions(self) -> str:
        return FUND_INSTRUCTIONS
