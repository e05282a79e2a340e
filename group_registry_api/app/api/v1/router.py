"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
Resource routers declare their collection route as ``""`` so that
``/api/groups`` is served without a trailing‑slash redirect.
"""

from fastapi import APIRouter

from .endpoints import groups, students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(groups.router, prefix="/groups", tags=["groups"])
