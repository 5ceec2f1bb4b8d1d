"""
Administrator endpoints.

These routes list the full roster and register new students.  They
are not protected by any authentication and are reachable exactly like
the student routes.
"""

from fastapi import APIRouter

from student_points_api.app.schemas.student import (
    AddStudentRequest,
    AddStudentResponse,
    StudentListResponse,
)
from student_points_api.app.services.roster_service import RosterService

router = APIRouter()


@router.get("/all-students", response_model=StudentListResponse)
async def list_students() -> StudentListResponse:
    """Return every student record, including per‑category points."""
    students = await RosterService.list_students()
    return StudentListResponse(students=students)


@router.post("/add-student", response_model=AddStudentResponse)
async def add_student(body: AddStudentRequest) -> AddStudentResponse:
    """Register a new student (HTTP 400 if the id already exists)."""
    student = await RosterService.add_student(body)
    return AddStudentResponse(message="Student added successfully", student=student)
