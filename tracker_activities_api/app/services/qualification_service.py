"""
Business logic for qualifications.

Recording a qualification runs three precondition queries, stopping at
the first failure:

1. the student exists;
2. the activity exists and belongs to the given subject;
3. the student has no qualification for that activity yet.

The checks and the insert are not atomic.  Two concurrent requests may
both pass the duplicate check; the ``UNIQUE(num_list_student,
id_activity)`` constraint then rejects the second insert, which is
reported as the same conflict as an explicit duplicate.
"""

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from ..core.errors import (
    BusinessRuleError,
    DuplicateQualificationError,
    IntegrityKind,
    classify_integrity_error,
)
from ..schemas.qualification import QualificationCreate, QualificationCreated, QualificationRead
from .student_service import StudentService

logger = logging.getLogger(__name__)

STUDENT_NOT_FOUND = "The specified student does not exist"
ACTIVITY_NOT_IN_SUBJECT = (
    "The specified activity does not exist or does not belong to the given subject"
)
ACTIVITY_NOT_FOUND = "The specified activity does not exist"
DUPLICATE_QUALIFICATION = "A qualification already exists for this student in this activity"


class QualificationService:
    """Service for listing and recording qualifications."""

    @classmethod
    async def list_qualifications(
        cls, conn: sqlite3.Connection, activity_id: int
    ) -> List[QualificationRead]:
        """Return the qualifications of an activity ordered by list number."""
        rows = conn.execute(
            """
            SELECT q.id, q.qualification, q.num_list_student, s.name AS student_name,
                   a.name AS activity_name, sub.subject AS subject_name
            FROM qualifications q
            INNER JOIN students s ON q.num_list_student = s.num_list
            INNER JOIN activities a ON q.id_activity = a.id
            INNER JOIN subjects sub ON a.id_subject = sub.id
            WHERE q.id_activity = ?
            ORDER BY s.num_list ASC
            """,
            (activity_id,),
        ).fetchall()
        return [QualificationRead(**dict(row)) for row in rows]

    @classmethod
    async def find_existing(
        cls, conn: sqlite3.Connection, num_list: int, activity_id: int
    ) -> Optional[Dict[str, Any]]:
        """Return the recorded qualification for a student/activity pair.

        The row carries the activity and subject names so a conflict
        can be reported with context.
        """
        row = conn.execute(
            """
            SELECT q.id, q.qualification, a.name AS activity_name, s.subject AS subject_name
            FROM qualifications q
            INNER JOIN activities a ON q.id_activity = a.id
            INNER JOIN subjects s ON a.id_subject = s.id
            WHERE q.num_list_student = ? AND q.id_activity = ?
            """,
            (num_list, activity_id),
        ).fetchone()
        return dict(row) if row else None

    @classmethod
    def _duplicate_error(
        cls, existing: Optional[Dict[str, Any]], num_list: int
    ) -> DuplicateQualificationError:
        details = None
        if existing:
            details = {
                "existing_qualification": existing["qualification"],
                "activity_name": existing["activity_name"],
                "subject_name": existing["subject_name"],
                "student_num_list": num_list,
            }
        return DuplicateQualificationError(DUPLICATE_QUALIFICATION, details)

    @classmethod
    async def create_qualification(
        cls, conn: sqlite3.Connection, data: QualificationCreate
    ) -> QualificationCreated:
        """Record a qualification after checking the preconditions.

        Raises ``BusinessRuleError`` for a missing student or activity
        and ``DuplicateQualificationError`` when the pair is already
        graded.
        """
        if not await StudentService.exists(conn, data.num_list):
            raise BusinessRuleError(STUDENT_NOT_FOUND)

        activity = conn.execute(
            "SELECT id FROM activities WHERE id = ? AND id_subject = ?",
            (data.id_activity, data.id_subject),
        ).fetchone()
        if not activity:
            raise BusinessRuleError(ACTIVITY_NOT_IN_SUBJECT)

        existing = await cls.find_existing(conn, data.num_list, data.id_activity)
        if existing:
            raise cls._duplicate_error(existing, data.num_list)

        cursor = conn.cursor()
        try:
            cursor.execute(
                """
                INSERT INTO qualifications (qualification, num_list_student, id_activity)
                VALUES (?, ?, ?)
                """,
                (data.qualification, data.num_list, data.id_activity),
            )
            qualification_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            kind = classify_integrity_error(e)
            if kind == IntegrityKind.FOREIGN_KEY:
                raise BusinessRuleError(ACTIVITY_NOT_FOUND) from e
            if kind == IntegrityKind.UNIQUE:
                logger.warning(
                    "Concurrent duplicate qualification for student %s, activity %s",
                    data.num_list,
                    data.id_activity,
                )
                existing = await cls.find_existing(conn, data.num_list, data.id_activity)
                raise cls._duplicate_error(existing, data.num_list) from e
            raise
        logger.info(
            "Recorded qualification %s for student %s in activity %s",
            qualification_id,
            data.num_list,
            data.id_activity,
        )
        return QualificationCreated(
            id=qualification_id,
            qualification=data.qualification,
            num_list_student=data.num_list,
            id_activity=data.id_activity,
        )
