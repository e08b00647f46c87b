"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_TOKEN: str = os.getenv("TELEGRAM_TOKEN", "")

# ── Solana ────────────────────────────────────────────────
SOLANA_RPC_ENDPOINT: str = os.getenv("SOLANA_RPC_ENDPOINT", "")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_settings() -> None:
    """
    Make sure every required variable is set.

    Raises:
        ConfigError: Naming the first missing variable.
    """
    if not SOLANA_RPC_ENDPOINT:
        raise ConfigError("SOLANA_RPC_ENDPOINT is not set")
    if not TELEGRAM_TOKEN:
        raise ConfigError("TELEGRAM_TOKEN is not set")
