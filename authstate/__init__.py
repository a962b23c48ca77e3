"""Client-side authentication state container.

The public surface is re-exported here so front ends can do::

    from authstate import AuthStore, create_auth_flows
"""

from .core.enums import ActionType
from .core.errors import ApiError, AuthError, ProtocolError, TransportError, ValidationError
from .core.result import Result
from .flows.auth_flows import AuthFlows
from .flows.factory import create_auth_flows
from .schemas.state import INITIAL_STATE, Action, AuthState
from .state.reducer import reducer
from .state.store import AuthStore

__all__ = [
    "Action",
    "ActionType",
    "ApiError",
    "AuthError",
    "AuthFlows",
    "AuthState",
    "AuthStore",
    "INITIAL_STATE",
    "ProtocolError",
    "Result",
    "TransportError",
    "ValidationError",
    "create_auth_flows",
    "reducer",
]
