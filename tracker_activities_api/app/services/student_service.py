"""
Business logic for students.

Students are created outside the API.  They are keyed by their list
number (``num_list``), which qualifications reference.
"""

import sqlite3
from typing import List

from ..schemas.student import StudentRead


class StudentService:
    """Read access to the ``students`` table."""

    @classmethod
    async def list_students(cls, conn: sqlite3.Connection) -> List[StudentRead]:
        """Return the full roster ordered by list number."""
        rows = conn.execute("SELECT num_list, name FROM students ORDER BY num_list ASC").fetchall()
        return [StudentRead(num_list=row["num_list"], name=row["name"]) for row in rows]

    @classmethod
    async def exists(cls, conn: sqlite3.Connection, num_list: int) -> bool:
        row = conn.execute("SELECT id FROM students WHERE num_list = ?", (num_list,)).fetchone()
        return row is not None
