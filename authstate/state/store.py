"""Single owner of the current AuthState."""

from __future__ import annotations

import logging
from typing import Callable

from authstate.schemas.state import INITIAL_STATE, Action, AuthState
from authstate.state.reducer import reducer

logger = logging.getLogger(__name__)

Listener = Callable[[AuthState], None]
Dispatch = Callable[[Action], Action]


class AuthStore:
    """Holds the auth state and applies dispatched actions through the reducer."""

    def __init__(self, state: AuthState = INITIAL_STATE) -> None:
        self._state = state
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AuthState:
        return self._state

    def dispatch(self, action: Action) -> Action:
        """Apply ``action`` and notify listeners if the state changed."""
        previous = self._state
        self._state = reducer(previous, action)
        logger.debug("dispatch %s", action.type)
        if self._state is not previous:
            for listener in list(self._listeners):
                listener(self._state)
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
