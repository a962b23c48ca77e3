"""Streamlit integration: page navigation and session_state mirroring."""

from __future__ import annotations

import logging
from typing import Callable

import streamlit as st

from authstate.schemas.state import AuthState
from authstate.state.store import AuthStore
from authstate.utils.navigation import Navigator

logger = logging.getLogger(__name__)

SESSION_STATE_KEY = "auth_state"


class StreamlitNavigator(Navigator):
    """Maps route paths onto Streamlit page scripts.

    Streamlit has no history API, so ``push`` and ``replace`` both switch
    page. Paths without a mapped page are ignored with a warning.
    """

    def __init__(self, routes: dict[str, str]) -> None:
        self.routes = dict(routes)

    def _switch(self, path: str) -> None:
        page = self.routes.get(path)
        if page is None:
            logger.warning("No Streamlit page mapped for %s", path)
            return
        st.switch_page(page)

    def replace(self, path: str) -> None:
        self._switch(path)

    def push(self, path: str) -> None:
        self._switch(path)


def bind_session_state(store: AuthStore, key: str = SESSION_STATE_KEY) -> Callable[[], None]:
    """Keep ``st.session_state[key]`` equal to the store's current state.

    Returns:
        A callable that stops the mirroring.
    """

    def _mirror(state: AuthState) -> None:
        st.session_state[key] = state

    _mirror(store.state)
    return store.subscribe(_mirror)
