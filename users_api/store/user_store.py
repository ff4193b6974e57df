"""
User Store
==========

Keeps users in a plain list that lives as long as the process does.
Nothing is persisted: a restart starts from an empty list.

There is no uniqueness check on name or email. Every create appends a new
record with its own id, in arrival order.
"""

import logging
import uuid
from typing import Optional

from users_api.schemas.models import User

logger = logging.getLogger(__name__)


class UserStore:
    """
    In-memory collection of users.

    Usage:
        store = UserStore()
        user = store.add("Ada Lovelace", "ada@example.com")
        store.list()  # [User(id=..., name="Ada Lovelace", ...)]
    """

    def __init__(self):
        self._users: list[User] = []

    def add(self, name: str, email: str) -> User:
        """
        Append a new user with a generated id.

        Args:
            name: Display name
            email: Email address (already validated by the request schema)

        Returns:
            The stored user
        """
        user = User(id=str(uuid.uuid4()), name=name, email=email)
        self._users.append(user)

        logger.debug(f"Stored user {user.id} ({len(self._users)} total)")
        return user

    def list(self) -> list[User]:
        """Return all users in insertion order."""
        return list(self._users)

    def clear(self) -> None:
        """Remove every stored user."""
        self._users.clear()
        logger.info("Cleared user store")

    @property
    def count(self) -> int:
        """Number of stored users."""
        return len(self._users)


# Lazily created on first use
_user_store: Optional[UserStore] = None


def get_user_store() -> UserStore:
    """Get or create the shared store instance."""
    global _user_store
    if _user_store is None:
        _user_store = UserStore()
    return _user_store
