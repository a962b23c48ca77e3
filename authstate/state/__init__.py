"""Reducer, action creators and the dispatching store."""

from .reducer import reducer
from .store import AuthStore

__all__ = ["AuthStore", "reducer"]
