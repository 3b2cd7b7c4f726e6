from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceState, Category


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): một học sinh trong danh sách."""

    internal_id: int
    display_id: str
    name: str
    category: Category
    attendance: AttendanceState

    def to_dict(self) -> dict:
        """Persisted/JSON shape of the record."""
        return {
            "internalId": self.internal_id,
            "displayId": self.display_id,
            "name": self.name,
            "category": self.category.value,
            "attendanceState": self.attendance.value,
        }
