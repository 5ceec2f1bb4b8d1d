"""
Pydantic models for student records and the roster API.

``StudentRecord`` and ``RosterDocument`` describe the persisted JSON
document; the remaining models are request and response bodies.  All
models use camelCase aliases because the data file and the browser
front end both speak camelCase.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Categories every new student starts with.  Submissions may add others.
DEFAULT_CATEGORIES = ("collar", "hair", "makeup", "shoes", "sweater")


class StudentRecord(BaseModel):
    """A single student as stored in the roster document."""

    # Unknown keys are kept as they are; numeric ids and labels are read as strings.
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    id: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    grade: str
    class_name: str = Field(..., alias="class")
    total_points: int = Field(0, alias="totalPoints")
    # ISO‑8601 UTC timestamp of the last accepted submission.
    last_fill_date: Optional[str] = Field(None, alias="lastFillDate")
    points_by_category: Dict[str, int] = Field(default_factory=dict, alias="pointsByCategory")


class RosterDocument(BaseModel):
    """The whole data file: an ordered list of students."""

    students: List[StudentRecord] = Field(default_factory=list)


class StudentSummary(BaseModel):
    """Public view of a student returned by ``GET /api/student/{id}``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    grade: str
    class_name: str = Field(..., alias="class")
    total_points: int = Field(..., alias="totalPoints")
    can_fill_today: bool = Field(..., alias="canFillToday")


class SubmitRequest(BaseModel):
    """Body of ``POST /api/submit``."""

    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(..., alias="studentId", min_length=1)
    # Category names; every occurrence earns points and unknown names are accepted.
    selections: List[str]


class AddStudentRequest(BaseModel):
    """Body of ``POST /api/admin/add-student``."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1, examples=["123456789"])
    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)
    grade: str = Field(..., min_length=1)
    class_name: str = Field(..., alias="className", min_length=1)


class StudentResponse(BaseModel):
    success: bool = True
    student: StudentSummary


class SubmitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    total_points: int = Field(..., alias="totalPoints")
    points_added: int = Field(..., alias="pointsAdded")


class StudentListResponse(BaseModel):
    success: bool = True
    students: List[StudentRecord]


class AddStudentResponse(BaseModel):
    success: bool = True
    message: str
    student: StudentRecord
