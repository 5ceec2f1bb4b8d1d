"""
Service layer for the student roster.

Each operation loads the roster document, works on it in memory and,
for writes, stores the whole document back.  The lookup and point
arithmetic live in small module level functions so they can be used
without touching the disk (``manage_roster.py`` and the tests do).

Points are awarded per selection: every selected category earns
``POINTS_PER_SELECTION`` and the student's total grows by the same
amount.  A student may submit once per local calendar day; the gate is
computed from ``lastFillDate`` on every request, there is no stored
flag.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from student_points_api.app.core.exceptions import (
    AlreadyFilledTodayError,
    DuplicateStudentError,
    StudentNotFoundError,
)
from student_points_api.app.core.storage import load_roster, save_roster
from student_points_api.app.schemas.student import (
    DEFAULT_CATEGORIES,
    AddStudentRequest,
    RosterDocument,
    StudentRecord,
    StudentSummary,
)

logger = logging.getLogger(__name__)

POINTS_PER_SELECTION = 5


def _now() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as UTC ISO‑8601 with milliseconds and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _local_date(timestamp: str) -> Optional[date]:
    """Return the local calendar date of a stored timestamp.

    Naive timestamps are taken to be local time.  Returns ``None`` if
    the value cannot be parsed.
    """
    value = timestamp.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).astimezone().date()
    except ValueError:
        return None


def has_filled_today(last_fill_date: Optional[str], now: Optional[datetime] = None) -> bool:
    """Return True if ``last_fill_date`` falls on today's local date.

    Only calendar dates are compared, so a fill at 23:59 yesterday does
    not block a submission at 00:01 today.
    """
    if not last_fill_date:
        return False
    filled_on = _local_date(last_fill_date)
    if filled_on is None:
        logger.warning("Ignoring unparseable lastFillDate %r", last_fill_date)
        return False
    current = (now or _now()).astimezone()
    return filled_on == current.date()


def find_student(roster: RosterDocument, student_id: str) -> Optional[StudentRecord]:
    """Return the student whose id equals ``student_id`` exactly, or None."""
    for student in roster.students:
        if student.id == student_id:
            return student
    return None


def award_points(student: StudentRecord, selections: List[str], now: Optional[datetime] = None) -> int:
    """Credit ``selections`` to ``student`` and stamp the fill date.

    Category names that the student does not have yet are created at
    zero.  Returns the number of points added.
    """
    for category in selections:
        student.points_by_category[category] = (
            student.points_by_category.get(category, 0) + POINTS_PER_SELECTION
        )
    points_added = POINTS_PER_SELECTION * len(selections)
    student.total_points += points_added
    student.last_fill_date = format_timestamp(now or _now())
    return points_added


def build_student(data: AddStudentRequest) -> StudentRecord:
    """Create a fresh record with zero points in every default category."""
    return StudentRecord(
        id=data.id,
        first_name=data.first_name,
        last_name=data.last_name,
        grade=data.grade,
        class_name=data.class_name,
        total_points=0,
        last_fill_date=None,
        points_by_category={category: 0 for category in DEFAULT_CATEGORIES},
    )


def add_to_roster(roster: RosterDocument, data: AddStudentRequest) -> StudentRecord:
    """Append a new student to ``roster``.

    Raises :class:`DuplicateStudentError` if the id is already taken.
    The roster is not saved.
    """
    if find_student(roster, data.id) is not None:
        raise DuplicateStudentError(data.id)
    student = build_student(data)
    roster.students.append(student)
    return student


class RosterService:
    """Operations exposed by the HTTP API."""

    @classmethod
    async def get_student(cls, student_id: str) -> StudentSummary:
        """Return the public view of a student including ``canFillToday``."""
        roster = load_roster()
        student = find_student(roster, student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return StudentSummary(
            id=student.id,
            first_name=student.first_name,
            last_name=student.last_name,
            grade=student.grade,
            class_name=student.class_name,
            total_points=student.total_points,
            can_fill_today=not has_filled_today(student.last_fill_date, _now()),
        )

    @classmethod
    async def submit(cls, student_id: str, selections: List[str]) -> Tuple[StudentRecord, int]:
        """Record today's selections for a student.

        Returns the updated record and the number of points added.  The
        roster is written exactly once on success and not at all when
        the student is missing or has already submitted today.
        """
        roster = load_roster()
        student = find_student(roster, student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        now = _now()
        if has_filled_today(student.last_fill_date, now):
            logger.info("Student %s already submitted today", student_id)
            raise AlreadyFilledTodayError()
        points_added = award_points(student, selections, now)
        save_roster(roster)
        logger.info(
            "Student %s earned %d points (total %d)", student_id, points_added, student.total_points
        )
        return student, points_added

    @classmethod
    async def list_students(cls) -> List[StudentRecord]:
        """Return every stored record as is."""
        return load_roster().students

    @classmethod
    async def add_student(cls, data: AddStudentRequest) -> StudentRecord:
        """Register a new student and persist the roster."""
        roster = load_roster()
        student = add_to_roster(roster, data)
        save_roster(roster)
        logger.info("Added student %s", student.id)
        return student
