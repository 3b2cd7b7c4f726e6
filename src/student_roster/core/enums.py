from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Nhóm học sinh: phổ thông hoặc cao đẳng."""

    SCHOOL = "School"
    COLLEGE = "College"


class AttendanceState(str, Enum):
    """Trạng thái điểm danh lưu trong bộ nhớ."""

    PRESENT = "Present"
    ABSENT = "Absent"


class FilterSelector(str, Enum):
    """Tiêu chí lọc đang áp dụng cho danh sách."""

    ALL = "All"
    PRESENT = "Present"
    ABSENT = "Absent"
    SCHOOL = "School"
    COLLEGE = "College"


class ModalState(str, Enum):
    """Vòng đời của hộp thoại chỉnh sửa."""

    CLOSED = "Closed"
    OPEN = "Open"
    CLOSING = "Closing"
