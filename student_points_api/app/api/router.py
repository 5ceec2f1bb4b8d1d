"""
Top‑level API router.

Aggregates the student and admin routers.  The application mounts this
router under ``/api``, giving paths such as ``/api/student/{id}`` and
``/api/admin/all-students``.
"""

from fastapi import APIRouter

from .endpoints import admin, students

router = APIRouter()

router.include_router(students.router, tags=["students"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
