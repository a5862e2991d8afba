"""
SQLite repository for payables.

Dates are stored as ISO ``YYYY-MM-DD`` text and parsed back into
``datetime.date`` by the ``PayableRead`` schema.  All queries use
parameterized statements.
"""

import logging
import sqlite3
from typing import List, Optional

from integrations_api.app.core.db import get_cursor
from integrations_api.app.schemas.payable import PayableCreate, PayableRead, PayableUpdate

logger = logging.getLogger(__name__)


class PayableRepository:
    """Persist payables in the ``payables`` table."""

    async def find_by_id(self, payable_id: str) -> Optional[PayableRead]:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, value, emission_date, assignor FROM payables WHERE id = ?",
                (payable_id,),
            ).fetchone()
        return self._row_to_payable(row) if row else None

    async def find_all(self) -> List[PayableRead]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, value, emission_date, assignor FROM payables ORDER BY created_at, id"
            ).fetchall()
        return [self._row_to_payable(row) for row in rows]

    async def create(self, data: PayableCreate) -> PayableRead:
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO payables (id, value, emission_date, assignor) VALUES (?, ?, ?, ?)",
                (data.id, data.value, data.emission_date.isoformat(), data.assignor),
            )
        logger.info("Created payable %s", data.id)
        return PayableRead(**data.model_dump())

    async def update(self, payable_id: str, data: PayableUpdate) -> PayableRead:
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE payables
                SET value = ?, emission_date = ?, assignor = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.value, data.emission_date.isoformat(), data.assignor, payable_id),
            )
            row = cursor.execute(
                "SELECT id, value, emission_date, assignor FROM payables WHERE id = ?",
                (payable_id,),
            ).fetchone()
        if row is None:
            raise LookupError(f"Payable {payable_id} disappeared during update")
        logger.info("Updated payable %s", payable_id)
        return self._row_to_payable(row)

    async def delete(self, payable_id: str) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM payables WHERE id = ?", (payable_id,))
        logger.info("Deleted payable %s", payable_id)

    @staticmethod
    def _row_to_payable(row: sqlite3.Row) -> PayableRead:
        return PayableRead(
            id=row["id"],
            value=row["value"],
            emission_date=row["emission_date"],
            assignor=row["assignor"],
        )
