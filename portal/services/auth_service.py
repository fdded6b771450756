"""
Mock authentication context.

Holds at most one signed-in user, persisted as a JSON blob in local storage
under a fixed key and rehydrated when the context is created. Callers get an
explicit AuthSession (opaque token + user) back and present the token on
later requests.
"""
from __future__ import annotations

import asyncio
import json
import logging
import re
import secrets
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from portal.core.identifiers import epoch_millis
from portal.core.local_storage import LocalStorage
from portal.schemas.portal_schema import SignupRequest, User


logger = logging.getLogger(__name__)

STORAGE_KEY = "insurance_user"
DEMO_PHONE = "+1 (555) 123-4567"
DEMO_ADDRESS = "123 Main St, Anytown, ST 12345"

_NON_LETTERS = re.compile(r"[^a-zA-Z]")


def display_name_from_email(email: str) -> str:
    """
    Derive a display name from the local part of an email address.

    Non-letters become word breaks and each word is capitalized:
    ``john.doe42@example.com`` -> ``John Doe``.
    """
    local_part = email.split("@")[0]
    words = _NON_LETTERS.sub(" ", local_part).split()
    return " ".join(word[0].upper() + word[1:] for word in words)


@dataclass
class AuthSession:
    """A signed-in user together with the token that identifies the session."""

    token: str
    user: User

    def to_json(self) -> str:
        return json.dumps({"token": self.token, "user": self.user.model_dump()})

    @classmethod
    def from_json(cls, raw: str) -> "AuthSession":
        """
        Rebuild a session from its stored JSON form.

        Raises:
            ValueError: If the blob is not a valid session.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError("stored session is not valid JSON") from exc
        if not isinstance(data, dict) or not data.get("token") or "user" not in data:
            raise ValueError("stored session is missing token or user")
        try:
            user = User.model_validate(data["user"])
        except ValidationError as exc:
            raise ValueError(f"stored user is invalid: {exc}") from exc
        return cls(token=str(data["token"]), user=user)


class AuthContext:
    """
    Single-user authentication state backed by local storage.

    Args:
        storage: Store that keeps the session across restarts.
        password: The one password literal every login must match.
        delay: Simulated API latency in seconds for login and signup.
    """

    def __init__(self, storage: LocalStorage, password: str = "password123", delay: float = 1.0):
        self._storage = storage
        self._password = password
        self._delay = delay
        self._session: Optional[AuthSession] = None
        self._rehydrate()

    def _rehydrate(self) -> None:
        try:
            raw = self._storage.get_item(STORAGE_KEY)
            if raw:
                self._session = AuthSession.from_json(raw)
                logger.info("Restored session for %s", self._session.user.email)
        except ValueError:
            logger.error("Error loading stored user data", exc_info=True)
            self._session = None

    @property
    def session(self) -> Optional[AuthSession]:
        return self._session

    @property
    def user(self) -> Optional[User]:
        return self._session.user if self._session else None

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def resolve(self, token: Optional[str]) -> Optional[AuthSession]:
        """Return the current session if ``token`` identifies it."""
        if not token or self._session is None:
            return None
        if secrets.compare_digest(token.encode("utf-8"), self._session.token.encode("utf-8")):
            return self._session
        return None

    def _start_session(self, user: User) -> AuthSession:
        session = AuthSession(token=secrets.token_urlsafe(32), user=user)
        self._session = session
        self._storage.set_item(STORAGE_KEY, session.to_json())
        return session

    async def _simulate_latency(self) -> None:
        if self._delay:
            await asyncio.sleep(self._delay)

    async def login(self, email: str, password: str) -> Optional[AuthSession]:
        """
        Sign in with any email and the demo password.

        Returns:
            The new session, or None when the password does not match.
        """
        await self._simulate_latency()
        if password != self._password:
            logger.warning("Login rejected for %s", email)
            return None

        user = User(
            id="1",
            name=display_name_from_email(email),
            email=email,
            phone=DEMO_PHONE,
            address=DEMO_ADDRESS,
        )
        logger.info("User %s logged in", email)
        return self._start_session(user)

    async def signup(self, data: SignupRequest) -> AuthSession:
        """Register a user. Always succeeds in the demo."""
        await self._simulate_latency()
        user = User(
            id=str(epoch_millis()),
            name=data.name,
            email=data.email,
            phone=data.phone,
            address=data.address,
        )
        logger.info("User %s signed up", data.email)
        return self._start_session(user)

    def logout(self) -> None:
        if self._session is not None:
            logger.info("User %s logged out", self._session.user.email)
        self._session = None
        self._storage.remove_item(STORAGE_KEY)


__all__ = [
    "AuthContext",
    "AuthSession",
    "display_name_from_email",
    "STORAGE_KEY",
]
