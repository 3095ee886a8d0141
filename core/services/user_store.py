# =============================================================================
# core/services/user_store.py - In-Memory User Store
# =============================================================================
# Holds all user records in a dict keyed by user ID.
#
# Route handlers run in FastAPI's threadpool, so the store is shared between
# threads. Every read and write of the dict happens under a single lock.
#
# Records never leave the store by reference: every method returns a copy,
# so a caller can serialize or hand off a User without racing later updates.
# =============================================================================

import logging
import threading
from uuid import uuid4

from core.models.user import User
from lib.utils import utc_now

logger = logging.getLogger(__name__)


class UserStore:
    """
    Thread-safe in-memory collection of users.

    Expected absence is reported as a return value (None / False),
    not an exception. The HTTP layer decides how to present it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def create(self, name: str, email: str) -> User:
        """
        Create and store a new user.

        The ID is a random UUID4 and created_at is the current UTC time.

        Args:
            name: Display name
            email: Email address

        Returns:
            Copy of the stored user
        """
        user = User(
            id=str(uuid4()),
            name=name,
            email=email,
            created_at=utc_now(),
        )

        with self._lock:
            self._users[user.id] = user
            snapshot = user.model_copy()

        logger.debug(f"Stored user: {user.id}")
        return snapshot

    def list_all(self) -> list[User]:
        """
        Get a snapshot of every stored user.

        Order is unspecified.
        """
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def get(self, user_id: str) -> User | None:
        """
        Look up a user by ID.

        Returns:
            Copy of the user, or None if no user has this ID
        """
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def update(
        self,
        user_id: str,
        name: str | None = None,
        email: str | None = None,
    ) -> User | None:
        """
        Update a user in place.

        Only non-empty values are applied. None and "" both mean
        "leave this field unchanged".

        Args:
            user_id: ID of the user to update
            name: New display name
            email: New email address

        Returns:
            Copy of the updated user, or None if no user has this ID
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None

            if name:
                user.name = name
            if email:
                user.email = email

            return user.model_copy()

    def delete(self, user_id: str) -> bool:
        """
        Remove a user.

        Returns:
            True if the user was removed, False if no user has this ID
        """
        with self._lock:
            removed = self._users.pop(user_id, None)

        if removed is None:
            return False

        logger.debug(f"Removed user: {user_id}")
        return True
