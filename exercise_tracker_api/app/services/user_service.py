"""
Business logic for users.

``UserService`` registers and lists users and resolves user identifiers
for the exercise and log services.  Usernames are stored as given; no
uniqueness check is made.
"""

import logging
from typing import List

from ..core.db import get_cursor, new_object_id
from ..core.errors import NotFoundError
from ..schemas.user import UserCreate, UserCreated, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Operations on the ``users`` collection."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserCreated:
        """Insert a new user and return its username and identifier."""
        logger.info("Registering user %s", data.username)
        user_id = new_object_id()
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (user_id, data.username),
            )
        return UserCreated(username=data.username, id=user_id)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return all users in the order they were registered."""
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, username FROM users ORDER BY rowid"
            ).fetchall()
        return [UserRead(id=row["id"], username=row["username"]) for row in rows]

    @classmethod
    async def get_user(cls, user_id: str) -> UserRead:
        """Retrieve a user by identifier.

        Raises ``NotFoundError`` if no user has this identifier.
        """
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError(f"User {user_id} not found")
        return UserRead(id=row["id"], username=row["username"])
