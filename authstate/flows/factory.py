"""Wiring of auth flows from settings."""

from __future__ import annotations

import httpx

from authstate.clients.graphql_client import GraphQLClient
from authstate.clients.http_client import HttpClient
from authstate.core.config import Settings, settings as default_settings
from authstate.flows.auth_flows import AuthFlows
from authstate.storage.token_store import FileTokenStore, TokenStore
from authstate.utils.navigation import HistoryNavigator, Navigator


def default_navigator(config: Settings) -> Navigator:
    """Return a Streamlit navigator when routes are configured, else in-memory history."""
    if config.STREAMLIT_ROUTES:
        # Local import: streamlit is only needed by Streamlit front ends
        from authstate.utils.streamlit_bridge import StreamlitNavigator
        return StreamlitNavigator(config.STREAMLIT_ROUTES)
    return HistoryNavigator()


def create_auth_flows(
        config: Settings | None = None,
        *,
        token_store: TokenStore | None = None,
        navigator: Navigator | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
) -> AuthFlows:
    """Build an :class:`AuthFlows` with clients sharing one token store.

    Args:
        config: Settings to use (default: the module-level singleton).
        token_store: Session token store (default: file store at TOKEN_STORE_PATH).
        navigator: Router facade (default: see :func:`default_navigator`).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        Configured flows.
    """
    config = config or default_settings
    store = token_store or FileTokenStore(config.TOKEN_STORE_PATH, config.AUTH_TOKEN_NAME)
    graphql = GraphQLClient(
        config.API_BASE_URL,
        store,
        timeout=config.REQUEST_TIMEOUT_SECONDS,
        transport=transport,
        graphql_path=config.GRAPHQL_PATH,
    )
    http = HttpClient(
        config.API_BASE_URL,
        store,
        timeout=config.REQUEST_TIMEOUT_SECONDS,
        transport=transport,
    )
    return AuthFlows(
        graphql,
        http,
        store,
        navigator or default_navigator(config),
        verify_email_path=config.VERIFY_EMAIL_PATH,
    )
