"""Client session store - durable login state."""

import json
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from app.models.common import BaseEntity

USER_KEY = "admin_user"
TOKEN_KEY = "admin_token"


@dataclass
class SessionUser(BaseEntity):
    """Profile of the logged-in user."""

    id: str
    email: str
    role: str
    first_name: str | None = None
    last_name: str | None = None


class SessionStore:
    """Holds the authenticated user and token, persisted to a JSON file."""

    def __init__(self, path: Path):
        self._path = Path(path)
        data = self._read()
        self.user = SessionUser.from_dict(data[USER_KEY]) if data.get(USER_KEY) else None
        self.token: str | None = data.get(TOKEN_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set_credentials(self, user: SessionUser, token: str) -> None:
        """Store a fresh login."""
        self.user = user
        self.token = token
        data = self._read()
        data[USER_KEY] = user.to_dict()
        data[TOKEN_KEY] = token
        self._write(data)
        logger.info("Logged in as {}", user.email)

    def logout(self) -> None:
        """Forget the current login."""
        self.user = None
        self.token = None
        data = self._read()
        data.pop(USER_KEY, None)
        data.pop(TOKEN_KEY, None)
        self._write(data)
        logger.info("Logged out")

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8").strip()
        try:
            data = json.loads(text) if text else {}
        except json.JSONDecodeError as e:
            logger.warning("Unreadable session file {}: {}", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
