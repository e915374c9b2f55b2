"""
Business logic for activities.

An activity is a gradable event (exam, assignment) that belongs to one
subject.  The subject is checked explicitly before inserting; the
foreign key on ``activities.id_subject`` catches the case where it
disappears in between.  All queries use parameterized statements.
"""

import logging
import sqlite3
from typing import List

from ..core.dates import format_date
from ..core.errors import BusinessRuleError, IntegrityKind, classify_integrity_error
from ..schemas.activity import ActivityCreate, ActivityCreated, ActivityRead
from .subject_service import SubjectService

logger = logging.getLogger(__name__)

SUBJECT_NOT_FOUND = "The specified subject does not exist"


class ActivityService:
    """Service for listing and creating activities."""

    @classmethod
    async def list_activities(cls, conn: sqlite3.Connection, subject_id: int) -> List[ActivityRead]:
        """Return the activities of a subject, newest first.

        Activities on the same date are ordered by name.  Dates are
        formatted as ``dd/mm/yyyy``.
        """
        rows = conn.execute(
            """
            SELECT a.id, a.name, a.date, a.description, s.subject AS subject_name
            FROM activities a
            INNER JOIN subjects s ON a.id_subject = s.id
            WHERE a.id_subject = ?
            ORDER BY a.date DESC, a.name ASC
            """,
            (subject_id,),
        ).fetchall()
        return [
            ActivityRead(
                id=row["id"],
                name=row["name"],
                date=format_date(row["date"]),
                description=row["description"],
                subject_name=row["subject_name"],
            )
            for row in rows
        ]

    @classmethod
    async def create_activity(cls, conn: sqlite3.Connection, data: ActivityCreate) -> ActivityCreated:
        """Insert a new activity and return the stored row.

        Raises ``BusinessRuleError`` when the subject does not exist,
        whether found by the explicit check or by the foreign key.
        """
        if not await SubjectService.exists(conn, data.id_subject):
            raise BusinessRuleError(SUBJECT_NOT_FOUND)
        cursor = conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO activities (name, date, id_subject, description)
                VALUES (?, ?, ?, ?)
                """,
                (data.name, data.date, data.id_subject, data.description),
            )
            activity_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if classify_integrity_error(e) == IntegrityKind.FOREIGN_KEY:
                raise BusinessRuleError(SUBJECT_NOT_FOUND) from e
            raise
        row = cursor.execute(
            "SELECT id, name, date, id_subject, description FROM activities WHERE id = ?",
            (activity_id,),
        ).fetchone()
        logger.info("Created activity %s for subject %s", activity_id, data.id_subject)
        return ActivityCreated(
            id=row["id"],
            name=row["name"],
            date=format_date(row["date"]),
            id_subject=row["id_subject"],
            description=row["description"],
        )
