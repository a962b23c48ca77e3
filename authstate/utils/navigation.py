"""Client-side route transitions triggered by auth flows."""

from __future__ import annotations

import abc
import logging

logger = logging.getLogger(__name__)

RESET_EMAIL_SENT_PATH = "/login/reset-email-sent"
RESET_PASSWORD_SUCCESS_PATH = "/login/reset-password-success"
ROOT_PATH = "/"


class Navigator(abc.ABC):
    """Router facade.

    ``replace`` is used after authentication so that the login page does not
    stay in the back history; ``push`` keeps it.
    """

    @abc.abstractmethod
    def replace(self, path: str) -> None:
        """Navigate to ``path`` replacing the current history entry."""

    @abc.abstractmethod
    def push(self, path: str) -> None:
        """Navigate to ``path`` adding a history entry."""


class HistoryNavigator(Navigator):
    """In-memory history stack, for headless clients and tests."""

    def __init__(self, start: str = ROOT_PATH) -> None:
        self.history: list[str] = [start]
        self.transitions: list[tuple[str, str]] = []

    @property
    def current(self) -> str:
        return self.history[-1]

    def replace(self, path: str) -> None:
        self.history[-1] = path
        self.transitions.append(("replace", path))
        logger.debug("replace -> %s", path)

    def push(self, path: str) -> None:
        self.history.append(path)
        self.transitions.append(("push", path))
        logger.debug("push -> %s", path)
