"""Durable storage for the session token."""

from .token_store import FileTokenStore, MemoryTokenStore, TokenStore

__all__ = ["TokenStore", "FileTokenStore", "MemoryTokenStore"]
