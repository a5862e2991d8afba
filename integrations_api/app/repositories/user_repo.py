"""
SQLite repository for users.

Passwords are hashed with ``hash_password`` before they reach the
database and are never mapped back into ``UserRead``.
"""

import logging
import sqlite3
from typing import List, Optional

from integrations_api.app.core.db import get_cursor
from integrations_api.app.core.security import hash_password
from integrations_api.app.schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


class UserRepository:
    """Persist users in the ``users`` table."""

    async def find_by_id(self, user_id: int) -> Optional[UserRead]:
        if not SQLITE_INT_MIN <= user_id <= SQLITE_INT_MAX:
            return None
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, login FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        return self._row_to_user(row) if row else None

    async def find_by_login(self, login: str) -> Optional[UserRead]:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, login FROM users WHERE login = ?", (login,)
            ).fetchone()
        return self._row_to_user(row) if row else None

    async def find_all(self) -> List[UserRead]:
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT id, login FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    async def create(self, data: UserCreate) -> UserRead:
        logger.info("Registering user %s", data.login)
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (login, password) VALUES (?, ?)",
                (data.login, hash_password(data.password)),
            )
            user_id = cursor.lastrowid
        return UserRead(id=user_id, login=data.login)

    async def update(self, user_id: int, data: UserCreate) -> UserRead:
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE users
                SET login = ?, password = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.login, hash_password(data.password), user_id),
            )
            row = cursor.execute(
                "SELECT id, login FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        if row is None:
            raise LookupError(f"User {user_id} disappeared during update")
        logger.info("Updated user %s", user_id)
        return self._row_to_user(row)

    async def delete(self, user_id: int) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
        logger.info("Deleted user %s", user_id)

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRead:
        return UserRead(id=row["id"], login=row["login"])
