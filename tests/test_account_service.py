"""Tests for keypair generation and the account replies."""

from solders.pubkey import Pubkey

from models.account import Account
from services.account_service import FUND_INSTRUCTIONS, AccountService


class TestAccount:

    def test_generate_produces_valid_keypair(self):
        account = Account.generate()
        pubkey = Pubkey.from_string(account.public_key)
        assert len(account.private_key) == 64
        # Secret key layout is seed || public key.
        assert account.private_key[32:] == bytes(pubkey)

    def test_private_key_hex(self):
        account = Account.generate()
        assert len(account.private_key_hex) == 128
        assert bytes.fromhex(account.private_key_hex) == account.private_key

    def test_repr_hides_private_key(self):
        account = Account.generate()
        assert account.private_key_hex not in repr(account)
        assert account.public_key in str(account)

    def test_generate_is_random(self):
        assert Account.generate().public_key != Account.generate().public_key


class TestAccountService:

    def test_create_account_message(self):
        lines = AccountService().create_account().split("\n")
        assert lines[0] == "New Solana account created:"
        assert lines[1].startswith("Public Key: ")
        assert lines[2].startswith("Private Key: ")
        public_key = lines[1].removeprefix("Public Key: ")
        private_hex = lines[2].removeprefix("Private Key: ")
        assert bytes.fromhex(private_hex)[32:] == bytes(Pubkey.from_string(public_key))

    def test_fund_instructions(self):
        assert AccountService().fund_instructions() == FUND_INSTRUCTIONS
        assert "/check_balance" in FUND_INSTRUCTIONS
