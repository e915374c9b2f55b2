"""
Student endpoints for API v1.

Students are managed outside the API, so only a list route exists.
"""

import sqlite3
from typing import Any, Dict

from fastapi import APIRouter, Depends

from tracker_activities_api.app.core.db import get_db
from tracker_activities_api.app.services.student_service import StudentService

router = APIRouter()


@router.get("/list", response_model=Dict[str, Any])
async def list_students(conn: sqlite3.Connection = Depends(get_db)) -> Dict[str, Any]:
    """List all students ordered by list number."""
    students = await StudentService.list_students(conn)
    return {"message": "Students retrieved successfully", "data": students}
