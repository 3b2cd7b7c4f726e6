from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceState, Category, FilterSelector
from ..students.model import Student


def apply_filter(students: Sequence[Student], selector: FilterSelector) -> list[Student]:
    """Subset of ``students`` matching ``selector``, always in insertion order."""
    if selector in (FilterSelector.PRESENT, FilterSelector.ABSENT):
        state = AttendanceState(selector.value)
        return [s for s in students if s.attendance == state]

    if selector in (FilterSelector.SCHOOL, FilterSelector.COLLEGE):
        category = Category(selector.value)
        return [s for s in students if s.category == category]

    return list(students)
