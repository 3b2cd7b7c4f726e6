from __future__ import annotations

from .core.enums import AttendanceState, Category
from .roster.service import RosterService

DEMO_STUDENTS = [
    ("Alice Nguyen", Category.SCHOOL, AttendanceState.PRESENT),
    ("Bob Tran", Category.COLLEGE, AttendanceState.ABSENT),
    ("Chi Le", Category.SCHOOL, AttendanceState.PRESENT),
    ("Dung Pham", Category.COLLEGE, AttendanceState.PRESENT),
]


def seed_demo_students(service: RosterService) -> int:
    """Add the demo roster through the service. Returns how many were added."""
    added = 0
    for name, category, attendance in DEMO_STUDENTS:
        student = service.add(name, category)
        if student is None:
            continue
        if attendance != service.default_attendance:
            service.set_attendance(student.internal_id, attendance)
        added += 1
    return added
