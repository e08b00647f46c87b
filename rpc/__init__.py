"""
rpc/ - Blockchain Access Layer
==============================
Thin wrappers around the Solana JSON-RPC API.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
