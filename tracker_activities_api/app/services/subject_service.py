"""
Business logic for subjects.

Subjects are created outside the API; this service only lists them.
"""

import sqlite3
from typing import List

from ..schemas.subject import SubjectRead


class SubjectService:
    """Read access to the ``subjects`` table."""

    @classmethod
    async def list_subjects(cls, conn: sqlite3.Connection) -> List[SubjectRead]:
        """Return all subjects ordered by name."""
        rows = conn.execute("SELECT id, subject FROM subjects ORDER BY subject ASC").fetchall()
        return [SubjectRead(id=row["id"], subject=row["subject"]) for row in rows]

    @classmethod
    async def exists(cls, conn: sqlite3.Connection, subject_id: int) -> bool:
        row = conn.execute("SELECT id FROM subjects WHERE id = ?", (subject_id,)).fetchone()
        return row is not None
