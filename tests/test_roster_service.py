"""
Unit tests for the roster helpers and the same-day gate
"""
import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from student_points_api.app.core.exceptions import (
    AlreadyFilledTodayError,
    DuplicateStudentError,
    StudentNotFoundError,
)
from student_points_api.app.schemas.student import (
    AddStudentRequest,
    RosterDocument,
    StudentRecord,
)
from student_points_api.app.services import roster_service
from student_points_api.app.services.roster_service import (
    RosterService,
    add_to_roster,
    award_points,
    find_student,
    format_timestamp,
    has_filled_today,
)
from tests.factories import make_student


def _roster(*students):
    return RosterDocument.model_validate({"students": list(students)})


class TestHasFilledToday:
    def test_never_filled(self):
        assert has_filled_today(None) is False
        assert has_filled_today("") is False

    def test_filled_earlier_today(self):
        now = datetime(2026, 10, 18, 15, 0).astimezone()
        morning = format_timestamp(datetime(2026, 10, 18, 8, 0).astimezone())
        assert has_filled_today(morning, now) is True

    def test_previous_day_less_than_24_hours_ago(self):
        now = datetime(2026, 10, 18, 0, 30).astimezone()
        late_yesterday = format_timestamp(datetime(2026, 10, 17, 23, 30).astimezone())
        assert has_filled_today(late_yesterday, now) is False

    def test_naive_timestamp_is_local_time(self):
        now = datetime(2026, 10, 18, 12, 0).astimezone()
        assert has_filled_today("2026-10-18T09:15:00", now) is True
        assert has_filled_today("2026-10-17T09:15:00", now) is False

    def test_unparseable_timestamp_does_not_block(self):
        now = datetime(2026, 10, 18, 12, 0).astimezone()
        assert has_filled_today("not a date", now) is False


class TestFormatTimestamp:
    def test_utc_with_milliseconds(self):
        moment = datetime(2026, 10, 18, 7, 45, 12, 345678, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2026-10-18T07:45:12.345Z"


class TestHelpers:
    def test_find_student_is_exact_match(self):
        roster = _roster(make_student("abc"), make_student("ABC"))
        assert find_student(roster, "ABC").id == "ABC"
        assert find_student(roster, "ab") is None

    def test_award_points_counts_each_selection(self):
        student = StudentRecord.model_validate(make_student(totalPoints=20))
        now = datetime(2026, 10, 18, 9, 0).astimezone()
        added = award_points(student, ["hair", "shoes", "hair"], now)
        assert added == 15
        assert student.total_points == 35
        assert student.points_by_category["hair"] == 10
        assert student.points_by_category["shoes"] == 5
        assert student.points_by_category["collar"] == 0
        assert student.last_fill_date == format_timestamp(now)

    def test_award_points_creates_unknown_categories(self):
        student = StudentRecord.model_validate(make_student(pointsByCategory={}))
        award_points(student, ["socks"])
        assert student.points_by_category == {"socks": 5}

    def test_award_points_with_no_selections_still_stamps_date(self):
        student = StudentRecord.model_validate(make_student())
        assert award_points(student, []) == 0
        assert student.total_points == 0
        assert student.last_fill_date is not None

    def test_add_to_roster_initialises_categories(self):
        roster = RosterDocument()
        student = add_to_roster(
            roster,
            AddStudentRequest(id="1", first_name="A", last_name="B", grade="9", class_name="2"),
        )
        assert roster.students == [student]
        assert student.total_points == 0
        assert student.last_fill_date is None
        assert student.points_by_category == {
            "collar": 0, "hair": 0, "makeup": 0, "shoes": 0, "sweater": 0,
        }

    def test_add_to_roster_rejects_duplicate(self):
        roster = _roster(make_student("1"))
        with pytest.raises(DuplicateStudentError):
            add_to_roster(
                roster,
                AddStudentRequest(id="1", first_name="A", last_name="B", grade="9", class_name="2"),
            )
        assert len(roster.students) == 1


class TestRosterService:
    def test_submit_twice_same_day(self, write_roster, read_roster, set_now):
        write_roster([make_student("7")])
        set_now(datetime(2026, 10, 18, 8, 0))
        student, added = asyncio.run(RosterService.submit("7", ["collar"]))
        assert (student.total_points, added) == (5, 5)

        set_now(datetime(2026, 10, 18, 20, 0))
        with pytest.raises(AlreadyFilledTodayError):
            asyncio.run(RosterService.submit("7", ["hair"]))
        stored = read_roster()["students"][0]
        assert stored["totalPoints"] == 5
        assert stored["pointsByCategory"]["hair"] == 0

    def test_submit_next_day(self, write_roster, set_now):
        write_roster([make_student("7")])
        set_now(datetime(2026, 10, 17, 23, 50))
        asyncio.run(RosterService.submit("7", ["collar"]))
        set_now(datetime(2026, 10, 18, 0, 5))
        student, _ = asyncio.run(RosterService.submit("7", ["collar"]))
        assert student.total_points == 10
        assert student.points_by_category["collar"] == 10

    def test_submit_unknown_student_does_not_write(self, data_file):
        with pytest.raises(StudentNotFoundError):
            asyncio.run(RosterService.submit("missing", ["hair"]))
        assert not data_file.exists()

    def test_get_student_reflects_gate(self, write_roster, set_now):
        now = set_now(datetime(2026, 10, 18, 12, 0))
        write_roster([
            make_student("a", lastFillDate=format_timestamp(now - timedelta(hours=1))),
            make_student("b", lastFillDate=format_timestamp(now - timedelta(days=1))),
        ])
        assert asyncio.run(RosterService.get_student("a")).can_fill_today is False
        assert asyncio.run(RosterService.get_student("b")).can_fill_today is True

    def test_clock_is_local_time(self):
        assert roster_service._now().tzinfo is not None
