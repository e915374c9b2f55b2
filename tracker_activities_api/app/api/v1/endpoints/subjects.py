"""
Subject endpoints for API v1.

Subjects are managed outside the API, so only a list route exists.
"""

import sqlite3
from typing import Any, Dict

from fastapi import APIRouter, Depends

from tracker_activities_api.app.core.db import get_db
from tracker_activities_api.app.services.subject_service import SubjectService

router = APIRouter()


@router.get("/list", response_model=Dict[str, Any])
async def list_subjects(conn: sqlite3.Connection = Depends(get_db)) -> Dict[str, Any]:
    """List all subjects ordered by name."""
    subjects = await SubjectService.list_subjects(conn)
    return {"message": "Subjects retrieved successfully", "data": subjects}
