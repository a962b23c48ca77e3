"""Session token storage backends."""

from __future__ import annotations

import abc
import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class TokenStore(abc.ABC):
    """A single named slot holding the session token.

    Writes are last-writer-wins and are not coordinated with state dispatch.
    """

    def __init__(self, key: str) -> None:
        self.key = key

    @abc.abstractmethod
    def set(self, token: str) -> None:
        """Persist ``token`` under this store's key."""

    @abc.abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or None if the slot is empty."""

    @abc.abstractmethod
    def remove(self) -> None:
        """Empty the slot. Removing an empty slot is a no-op."""


class MemoryTokenStore(TokenStore):
    """Process-local store for tests and short-lived clients."""

    def __init__(self, key: str = "authToken", token: str | None = None) -> None:
        super().__init__(key)
        self._token = token

    def set(self, token: str) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def remove(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    """JSON file store that survives process restarts.

    The file maps storage keys to tokens so several clients can share one
    file. Every write replaces the file atomically.
    """

    def __init__(self, path: str | Path, key: str) -> None:
        super().__init__(key)
        self.path = Path(path).expanduser()

    def _read_all(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable token store at %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed token store at %s", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tokens-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def set(self, token: str) -> None:
        data = self._read_all()
        data[self.key] = token
        self._write_all(data)
        logger.debug("Stored session token under %s", self.key)

    def get(self) -> str | None:
        return self._read_all().get(self.key)

    def remove(self) -> None:
        data = self._read_all()
        if data.pop(self.key, None) is None:
            return
        self._write_all(data)
        logger.debug("Removed session token %s", self.key)
