"""
Activity endpoints for API v1.

Activities can be created with a JSON body (``POST /create``) or with
query parameters (``GET /create``, e.g.
``?id=1&name=Exam&date=2024-12-01&description=Desc``).  Both routes
share the same validation, checks and response.
"""

import sqlite3
from typing import Any, Dict, Mapping, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status

from tracker_activities_api.app.core.db import get_db
from tracker_activities_api.app.core.validation import parse_params
from tracker_activities_api.app.schemas.activity import ActivityCreate, ActivityFilter
from tracker_activities_api.app.services.activity_service import ActivityService

router = APIRouter()


@router.get("/list", response_model=Dict[str, Any])
async def list_activities(
    id_subject: Optional[str] = Query(None, description="Subject identifier"),
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """List the activities of a subject, newest first."""
    params = parse_params(ActivityFilter, {"id_subject": id_subject})
    activities = await ActivityService.list_activities(conn, params.id_subject)
    return {"message": "Activities retrieved successfully", "data": activities}


async def _create(conn: sqlite3.Connection, raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    data = parse_params(ActivityCreate, raw)
    activity = await ActivityService.create_activity(conn, data)
    return {"message": "Activity created successfully", "id": activity.id, "data": activity}


@router.post("/create", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_activity(
    payload: Optional[Dict[str, Any]] = Body(None),
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """Create an activity from a JSON body.

    Expects ``id`` (subject), ``name``, ``date`` (``YYYY-MM-DD``) and an
    optional ``description``.
    """
    return await _create(conn, payload)


@router.get("/create", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_activity_from_query(
    request: Request,
    conn: sqlite3.Connection = Depends(get_db),
) -> Dict[str, Any]:
    """Create an activity from query parameters."""
    return await _create(conn, request.query_params)
