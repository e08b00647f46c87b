"""
models/account.py
-----------------
Domain model for a freshly generated Solana keypair.
"""

from dataclasses import dataclass

from solders.keypair import Keypair


@dataclass(frozen=True)
class Account:
    """
    An ephemeral Solana account. Never persisted.

    Attributes:
        public_key: Base58-encoded public key (the account address).
        private_key: 64-byte secret key (32-byte seed followed by the public key).
    """
    public_key: str
    private_key: bytes

    @classmethod
    def generate(cls) -> "Account":
        """Create a brand-new random keypair."""
        return cls.from_keypair(Keypair())

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> "Account":
        return cls(public_key=str(keypair.pubkey()), private_key=bytes(keypair))

    @property
    def private_key_hex(self) -> str:
        """Lower-case hex of the full 64-byte secret key."""
        return self.private_key.hex()

    def __str__(self) -> str:
        # Keep secrets out of logs and reprs.
        return f"Account({self.public_key})"

    __repr__ = __str__
