"""Asynchronous auth flows."""

from .auth_flows import AuthFlows
from .factory import create_auth_flows

__all__ = ["AuthFlows", "create_auth_flows"]
