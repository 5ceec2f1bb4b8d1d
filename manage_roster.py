#!/usr/bin/env python3
"""
Inspect or extend the student roster without running the server.

The script works on the same JSON file as the API and applies the same
rules as ``POST /api/admin/add-student`` (all fields required, ids
unique).

Usage:
    python manage_roster.py list
    python manage_roster.py --data-file ./data/students.json add \
        --id 123456789 --first-name Dana --last-name Levi --grade 10 --class-name 3
"""

import argparse
import os
import sys

from pydantic import ValidationError

from student_points_api.app.core.config import settings
from student_points_api.app.core.exceptions import RosterError
from student_points_api.app.core.storage import ensure_data_dir, load_roster, save_roster
from student_points_api.app.schemas.student import AddStudentRequest
from student_points_api.app.services.roster_service import add_to_roster


def main(argv=None):
    ap = argparse.ArgumentParser(description="Manage the student points roster file.")
    ap.add_argument("--data-file", help="Path to the roster JSON file (overrides DATA_FILE)")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="Print every student")

    add = sub.add_parser("add", help="Register a new student")
    add.add_argument("--id", required=True, help="Student identifier, e.g. national ID")
    add.add_argument("--first-name", required=True)
    add.add_argument("--last-name", required=True)
    add.add_argument("--grade", required=True)
    add.add_argument("--class-name", required=True)

    args = ap.parse_args(argv)

    if args.data_file:
        settings.data_file = os.path.abspath(args.data_file)

    try:
        roster = load_roster()
        if args.command == "list":
            for s in roster.students:
                print(f"{s.id}\t{s.first_name} {s.last_name}\t{s.grade}/{s.class_name}\t{s.total_points}")
            print(f"[+] {len(roster.students)} student(s)")
            return 0

        request = AddStudentRequest(
            id=args.id,
            first_name=args.first_name,
            last_name=args.last_name,
            grade=args.grade,
            class_name=args.class_name,
        )
        student = add_to_roster(roster, request)
        ensure_data_dir()
        save_roster(roster)
        print(f"[+] Added student: {student.id}")
        return 0
    except ValidationError as exc:
        print(f"[!] Missing or empty fields: {exc}", file=sys.stderr)
        return 1
    except RosterError as exc:
        print(f"[!] {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
