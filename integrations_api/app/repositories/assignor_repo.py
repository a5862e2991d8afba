"""SQLite repository for assignors."""

import logging
import sqlite3
from typing import List, Optional

from integrations_api.app.core.db import get_cursor
from integrations_api.app.schemas.assignor import AssignorCreate, AssignorRead, AssignorUpdate

logger = logging.getLogger(__name__)

_COLUMNS = "id, document, email, phone, name"


class AssignorRepository:
    """Persist assignors in the ``assignors`` table."""

    async def find_by_id(self, assignor_id: str) -> Optional[AssignorRead]:
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM assignors WHERE id = ?",
                (assignor_id,),
            ).fetchone()
        return self._row_to_assignor(row) if row else None

    async def find_all(self) -> List[AssignorRead]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM assignors ORDER BY created_at, id"
            ).fetchall()
        return [self._row_to_assignor(row) for row in rows]

    async def create(self, data: AssignorCreate) -> AssignorRead:
        with get_cursor() as cursor:
            cursor.execute(
                f"INSERT INTO assignors ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                (data.id, data.document, data.email, data.phone, data.name),
            )
        logger.info("Created assignor %s", data.id)
        return AssignorRead(**data.model_dump())

    async def update(self, assignor_id: str, data: AssignorUpdate) -> AssignorRead:
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE assignors
                SET document = ?, email = ?, phone = ?, name = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.document, data.email, data.phone, data.name, assignor_id),
            )
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM assignors WHERE id = ?",
                (assignor_id,),
            ).fetchone()
        if row is None:
            raise LookupError(f"Assignor {assignor_id} disappeared during update")
        logger.info("Updated assignor %s", assignor_id)
        return self._row_to_assignor(row)

    async def delete(self, assignor_id: str) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM assignors WHERE id = ?", (assignor_id,))
        logger.info("Deleted assignor %s", assignor_id)

    @staticmethod
    def _row_to_assignor(row: sqlite3.Row) -> AssignorRead:
        return AssignorRead(**{key: row[key] for key in row.keys()})
