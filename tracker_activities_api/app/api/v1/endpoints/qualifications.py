"""
Qualification endpoints for API v1.

Besides listing and recording qualifications, this router serves the
grid view of a subject: students as rows, activities as columns.
Qualifications can be recorded with a JSON body (``POST /create``) or
with query parameters (``GET /create``, e.g.
``?id_subject=1&num_list=5&qualification=85&id_activity=2``).
"""

import sqlite3
from typing import Any, Dict, Mapping, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status

from tracker_activities_api.app.core.db import get_db
from tracker_activities_api.app.core.validation import parse_params
from tracker_activities_api.app.schemas.qualification import (
    GridFilter,
    QualificationCreate,
    QualificationFilter,
)
from tracker_activities_api.app.services.grid_service import GridService, identity_columns
from tracker_activities_api.app.services.qualification_service import QualificationService

router = APIRouter()


@router.get("/list", response_model=Dict[str, Any])
async def list_qualifications(
    id_activity: Optional[str] = Query(None, description="Activity identifier"),
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """List the qualifications recorded for an activity."""
    params = parse_params(QualificationFilter, {"id_activity": id_activity})
    qualifications = await QualificationService.list_qualifications(conn, params.id_activity)
    return {"message": "Qualifications retrieved successfully", "data": qualifications}


async def _create(conn: sqlite3.Connection, raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    data = parse_params(QualificationCreate, raw)
    qualification = await QualificationService.create_qualification(conn, data)
    return {
        "message": "Qualification created successfully",
        "id": qualification.id,
        "data": qualification,
    }


@router.post("/create", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_qualification(
    payload: Optional[Dict[str, Any]] = Body(None),
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """Record a qualification from a JSON body.

    A second qualification for the same student and activity is
    rejected with 409 and the details of the existing one.
    """
    return await _create(conn, payload)


@router.get("/create", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_qualification_from_query(
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """Record a qualification from query parameters."""
    return await _create(conn, request.query_params)


@router.get("/grid", response_model=Dict[str, Any])
async def qualification_grid(
    id_subject: Optional[str] = Query(None, description="Subject identifier"),
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """Return the students × activities grid of a subject."""
    params = parse_params(GridFilter, {"id_subject": id_subject})
    grid = await GridService.get_grid(conn, params.id_subject)
    if grid is None:
        return {
            "message": "No activities for this subject",
            "data": {"columns": identity_columns(), "rows": []},
        }
    return {"message": "Qualification grid retrieved successfully", "data": grid}
