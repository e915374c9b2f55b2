"""
Health endpoint.

Returns a static confirmation payload with the current time and the
list of available routes, so a client can check the server is up and
discover what it offers.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import APIRouter, Request

router = APIRouter()

ROUTES = [
    "GET {prefix}/subjects/list",
    "GET {prefix}/students/list",
    "POST {prefix}/activities/create",
    "GET {prefix}/activities/create?id=1&name=Exam&date=2024-12-01&description=Desc",
    "GET {prefix}/activities/list?id_subject=1",
    "POST {prefix}/qualifications/create",
    "GET {prefix}/qualifications/create?id_subject=1&num_list=5&qualification=85&id_activity=2",
    "GET {prefix}/qualifications/list?id_activity=1",
    "GET {prefix}/qualifications/grid?id_subject=1",
]


def list_routes(prefix: str) -> List[str]:
    return [route.format(prefix=prefix) for route in ROUTES]


@router.get("/health", response_model=Dict[str, Any])
async def health(request: Request) -> Dict[str, Any]:
    return {
        "message": "Server running correctly",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": list_routes(request.app.state.settings.api_prefix),
    }
