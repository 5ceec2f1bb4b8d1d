"""
Shared fixtures for the Student Points API tests.

Every test gets its own roster file under ``tmp_path`` so nothing is
written to the real data directory.
"""
import json
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from student_points_api.app.core.config import settings
from student_points_api.app.services import roster_service


@pytest.fixture(autouse=True)
def data_file(tmp_path, monkeypatch):
    """Point the storage layer at a temporary roster file."""
    path = tmp_path / "students.json"
    monkeypatch.setattr(settings, "data_file", str(path))
    return path


@pytest.fixture
def client():
    """Create a test client"""
    from student_points_api.app.main import app
    return TestClient(app)


@pytest.fixture
def write_roster(data_file):
    """Write a list of raw student dicts as the roster document."""
    def _write(students):
        data_file.write_text(json.dumps({"students": students}), encoding="utf-8")
    return _write


@pytest.fixture
def read_roster(data_file):
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def set_now(monkeypatch):
    """Pin the service clock to a local wall‑clock time."""
    def _set(moment: datetime):
        aware = moment.astimezone()
        monkeypatch.setattr(roster_service, "_now", lambda: aware)
        return aware
    return _set
