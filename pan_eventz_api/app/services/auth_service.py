"""
Authentication service for the admin panel.

There is a single administrator whose credentials come from the
settings and who is inserted into the ``users`` table at start-up with
a hashed password.  A successful login yields a signed token carrying
``userId``, ``username`` and ``role`` that is valid for
``Settings.access_token_expire_minutes``.
"""

import logging
from typing import Any, Dict, Optional

from pan_eventz_api.app.core.config import Settings
from pan_eventz_api.app.core.db import MockDB, eq, users
from pan_eventz_api.app.core.security import create_access_token, verify_password


logger = logging.getLogger(__name__)


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Return the user fields that may be sent to clients."""
    return {
        "id": user["id"],
        "username": user["username"],
        "name": user.get("name"),
        "role": user["role"],
    }


class AuthService:
    """Validates credentials and issues access tokens."""

    def __init__(self, db: MockDB, settings: Settings) -> None:
        self.db = db
        self.settings = settings

    async def authenticate(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Return the user for a valid username/password pair, else ``None``."""
        user = self.db.query[users].find_first(where=eq(users.c.username, username))
        if user is None or not verify_password(password, user.get("password", "")):
            logger.warning("Failed login attempt for %s", username)
            return None
        return user

    def issue_token(self, user: Dict[str, Any]) -> str:
        return create_access_token(
            {"userId": user["id"], "username": user["username"], "role": user["role"]},
            expires_delta=self.settings.access_token_expire_minutes * 60,
            secret=self.settings.jwt_secret,
        )

    async def login(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Authenticate and build the login response, or return ``None``."""
        user = await self.authenticate(username, password)
        if user is None:
            return None
        logger.info("User %s logged in", username)
        return {"token": self.issue_token(user), "user": public_user(user)}
