"""Student Points API client.

This module defines a small client wrapper around the Student Points
HTTP API.  It uses the ``requests`` library internally and exposes one
method per route:

* :meth:`StudentPointsAPI.get_student` – public details of one student.
* :meth:`StudentPointsAPI.submit` – submit today's selections.
* :meth:`StudentPointsAPI.list_students` – every stored record (admin).
* :meth:`StudentPointsAPI.add_student` – register a new student (admin).

All methods return a ``(data, error)`` tuple instead of raising.  On
failure ``error`` is a dictionary with ``status_code`` and ``message``;
the message is taken from the service's JSON body when there is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudentPointsAPI:
    """Client for the Student Points API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            on success; on failure it is ``None`` and ``error`` describes
            the problem.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Student operations
    # ------------------------------------------------------------------
    def get_student(self, student_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a student's public details, including ``canFillToday``."""
        data, error = self._request("GET", f"/api/student/{quote(student_id, safe='')}")
        if error:
            return None, error
        return (data or {}).get("student"), None

    def submit(self, student_id: str, selections: List[str]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Submit today's selections.

        Returns:
            A tuple ``(result, error)`` where ``result`` holds
            ``totalPoints`` and ``pointsAdded``.
        """
        return self._request(
            "POST",
            "/api/submit",
            json_body={"studentId": student_id, "selections": list(selections)},
        )

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------
    def list_students(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every student record."""
        data, error = self._request("GET", "/api/admin/all-students")
        if error:
            return [], error
        students = (data or {}).get("students")
        return (students if isinstance(students, list) else []), None

    def add_student(
        self,
        student_id: str,
        first_name: str,
        last_name: str,
        grade: str,
        class_name: str,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a new student and return the created record."""
        payload = {
            "id": student_id,
            "firstName": first_name,
            "lastName": last_name,
            "grade": grade,
            "className": class_name,
        }
        data, error = self._request("POST", "/api/admin/add-student", json_body=payload)
        if error:
            return None, error
        return (data or {}).get("student"), None
