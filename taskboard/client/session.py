"""Client-side session store: the current token and user, persisted between runs."""

from __future__ import annotations

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SESSION_PATH = Path.home() / ".taskboard" / "session.json"


class SessionState(str, Enum):
    UNKNOWN = "unknown"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionStore:
    """
    Holds {token, user} for one client and mirrors it to a JSON file.

    Starts UNKNOWN; load() moves it to ANONYMOUS or AUTHENTICATED. A persisted
    token is trusted as-is until the server answers 401. From there the only
    transitions are save() (login/register) and clear() (logout or 401).
    """

    def __init__(self, path: Path | str = DEFAULT_SESSION_PATH) -> None:
        self.path = Path(path)
        self.state = SessionState.UNKNOWN
        self.token: str | None = None
        self.user: dict[str, Any] | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    def load(self) -> SessionState:
        """Read the persisted pair; a missing or unreadable file means anonymous."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            data = None
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            data = None

        if isinstance(data, dict) and data.get("token") and isinstance(data.get("user"), dict):
            self._set(data["token"], data["user"])
        else:
            self._reset()
        return self.state

    def save(self, token: str, user: dict[str, Any]) -> None:
        """Persist a freshly issued token with its user and become authenticated."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump({"token": token, "user": user}, fh)
        self._set(token, user)

    def clear(self) -> None:
        """Forget the session locally. Tokens are stateless, so the server is not told."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        self._reset()

    def _set(self, token: str, user: dict[str, Any]) -> None:
        self.token = token
        self.user = user
        self.state = SessionState.AUTHENTICATED

    def _reset(self) -> None:
        self.token = None
        self.user = None
        self.state = SessionState.ANONYMOUS
