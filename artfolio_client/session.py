"""Client‑side session storage.

A tiny key‑value store that plays the role of the browser's session
storage: it remembers who is logged in (``memberId``, ``usersName``,
``userEmail``, ``accessToken``) and which portfolio is open
(``currentPortfolio``).  When a path is given the values are also
written to a JSON file so a restarted client keeps its session.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

MEMBER_ID = "memberId"
USERS_NAME = "usersName"
USER_EMAIL = "userEmail"
CURRENT_PORTFOLIO = "currentPortfolio"
ACCESS_TOKEN = "accessToken"


class SessionStore:
    """Key‑value session store with optional JSON file persistence."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path
        self._data: Dict[str, Any] = {}
        if path and os.path.exists(path):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable session file %s: %s", path, exc)
            else:
                if isinstance(loaded, dict):
                    self._data = loaded

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._save()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._save()

    def clear(self) -> None:
        self._data = {}
        self._save()

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    # Convenience accessors for the login identity ------------------------

    @property
    def logged_in(self) -> bool:
        return bool(self._data.get(USERS_NAME))

    def remember_member(self, member: Dict[str, Any]) -> None:
        """Store the identity returned by a successful login."""
        self._data[MEMBER_ID] = member.get("id")
        self._data[USERS_NAME] = member.get("username")
        self._data[USER_EMAIL] = member.get("email")
        self._data[ACCESS_TOKEN] = member.get("access_token")
        self._save()

    def _save(self) -> None:
        if not self.path:
            return
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f)
