"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (subjects, students,
activities, qualifications).  ``create_app`` mounts it below
``settings.api_prefix``; the health route is mounted separately under
``/api``.
"""

from fastapi import APIRouter

from .endpoints import activities, qualifications, students, subjects

router = APIRouter()

router.include_router(subjects.router, prefix="/subjects", tags=["subjects"])
router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(activities.router, prefix="/activities", tags=["activities"])
router.include_router(qualifications.router, prefix="/qualifications", tags=["qualifications"])
