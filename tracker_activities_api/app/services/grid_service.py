"""
Qualification grid for a subject.

The grid is a pivot table with one row per student and one column per
activity of the subject.  It is built from three flat queries
(activities, students, qualifications) by ``build_grid``, which does
not touch the database and can be exercised on its own.
"""

import sqlite3
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.dates import format_date

IDENTITY_COLUMNS: List[Dict[str, Any]] = [
    {"key": "num_list", "label": "List No.", "type": "number"},
    {"key": "student_name", "label": "Student Name", "type": "text"},
]


def activity_key(activity_id: int) -> str:
    return f"activity_{activity_id}"


def identity_columns() -> List[Dict[str, Any]]:
    return [dict(column) for column in IDENTITY_COLUMNS]


def build_grid(
    activities: Sequence[Mapping[str, Any]],
    students: Sequence[Mapping[str, Any]],
    qualifications: Sequence[Mapping[str, Any]],
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Pivot flat rows into ``(columns, rows)``.

    ``activities`` carry ``id``, ``name`` and ``date``; ``students``
    carry ``num_list`` and ``name``; ``qualifications`` carry
    ``num_list_student``, ``id_activity`` and ``qualification``.
    Missing student/activity pairs become ``None``.
    """
    scores: Dict[Tuple[int, int], int] = {
        (q["num_list_student"], q["id_activity"]): q["qualification"] for q in qualifications
    }

    columns = identity_columns()
    for activity in activities:
        columns.append(
            {
                "key": activity_key(activity["id"]),
                "label": activity["name"],
                "type": "qualification",
                "activity_id": activity["id"],
                "activity_date": format_date(activity["date"]),
            }
        )

    rows: List[Dict[str, Any]] = []
    for student in students:
        row: Dict[str, Any] = {
            "num_list": student["num_list"],
            "student_name": student["name"],
        }
        for activity in activities:
            row[activity_key(activity["id"])] = scores.get((student["num_list"], activity["id"]))
        rows.append(row)
    return columns, rows


class GridService:
    """Loads the rows behind a subject's grid and pivots them."""

    @classmethod
    async def get_grid(cls, conn: sqlite3.Connection, subject_id: int) -> Optional[Dict[str, Any]]:
        """Return the grid for ``subject_id``.

        Returns ``None`` when the subject has no activities; the caller
        answers with an empty grid in that case.
        """
        activities = conn.execute(
            """
            SELECT id, name, date
            FROM activities
            WHERE id_subject = ?
            ORDER BY date ASC, name ASC
            """,
            (subject_id,),
        ).fetchall()
        if not activities:
            return None

        # The whole roster, not only students graded in this subject.
        students = conn.execute("SELECT num_list, name FROM students ORDER BY num_list ASC").fetchall()
        qualifications = conn.execute(
            """
            SELECT q.qualification, q.num_list_student, q.id_activity
            FROM qualifications q
            INNER JOIN activities a ON q.id_activity = a.id
            WHERE a.id_subject = ?
            """,
            (subject_id,),
        ).fetchall()

        columns, rows = build_grid(activities, students, qualifications)
        return {
            "subject_id": subject_id,
            "total_students": len(students),
            "total_activities": len(activities),
            "columns": columns,
            "rows": rows,
        }
