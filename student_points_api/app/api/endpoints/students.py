"""
Student‑facing endpoints.

A student looks up their record by id to see their points and whether the
daily form is still open, then submits the selected categories.  Both
routes are public.
"""

from fastapi import APIRouter

from student_points_api.app.schemas.student import (
    StudentResponse,
    SubmitRequest,
    SubmitResponse,
)
from student_points_api.app.services.roster_service import RosterService

router = APIRouter()


@router.get("/student/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str) -> StudentResponse:
    """Return a student's public details and ``canFillToday``.

    Returns HTTP 404 if no student has this id.
    """
    student = await RosterService.get_student(student_id)
    return StudentResponse(student=student)


@router.post("/submit", response_model=SubmitResponse)
async def submit(body: SubmitRequest) -> SubmitResponse:
    """Save today's selections for a student.

    Each selection is worth five points.  Returns HTTP 400 when the
    student has already submitted today and HTTP 404 for an unknown id.
    """
    student, points_added = await RosterService.submit(body.student_id, body.selections)
    return SubmitResponse(
        message="Data saved successfully",
        total_points=student.total_points,
        points_added=points_added,
    )
