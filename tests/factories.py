"""Builders for raw roster records used across the tests."""


def make_student(student_id="123456789", **overrides):
    record = {
        "id": student_id,
        "firstName": "Dana",
        "lastName": "Levi",
        "grade": "10",
        "class": "3",
        "totalPoints": 0,
        "lastFillDate": None,
        "pointsByCategory": {"collar": 0, "hair": 0, "makeup": 0, "shoes": 0, "sweater": 0},
    }
    record.update(overrides)
    return record
