"""Normalization of persisted student entries.

Old or hand-edited data is accepted: every unrecognised or missing field falls
back to a default instead of failing. Fallback rules:

- ``internalId`` (legacy ``id``) not an integer -> freshly generated id
- ``displayId`` missing or blank -> freshly generated display id
- ``category`` (legacy ``type``) other than exactly ``"College"`` -> School
- ``attendanceState`` (legacy ``attendance``) other than exactly ``"Absent"`` -> Present
- ``name`` missing -> ``""``; non-string -> ``str(value)``
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ..core.enums import AttendanceState, Category
from .identifiers import DisplayIdGenerator, InternalIdGenerator
from .model import Student

logger = logging.getLogger(__name__)

_ALIASES = {
    "internalId": ("internalId", "id"),
    "displayId": ("displayId",),
    "name": ("name",),
    "category": ("category", "type"),
    "attendanceState": ("attendanceState", "attendance"),
}


def _pick(raw: dict, field: str) -> Any:
    for key in _ALIASES[field]:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _coerce_internal_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def raw_internal_id(raw: dict) -> Optional[int]:
    """The usable integer id stored in ``raw``, if any."""
    return _coerce_internal_id(_pick(raw, "internalId"))


def normalize(raw: dict, *, internal_ids: InternalIdGenerator, display_ids: DisplayIdGenerator) -> Student:
    internal_id = raw_internal_id(raw)
    if internal_id is None:
        internal_id = internal_ids.next_id()

    display_id = _pick(raw, "displayId")
    if not isinstance(display_id, str) or not display_id.strip():
        display_id = display_ids.new_display_id()

    name = _pick(raw, "name")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        name = str(name)

    category = Category.COLLEGE if _pick(raw, "category") == Category.COLLEGE.value else Category.SCHOOL
    attendance = (
        AttendanceState.ABSENT
        if _pick(raw, "attendanceState") == AttendanceState.ABSENT.value
        else AttendanceState.PRESENT
    )

    return Student(
        internal_id=internal_id,
        display_id=display_id,
        name=name,
        category=category,
        attendance=attendance,
    )


def dedupe_display_ids(students: Iterable[Student], *, display_ids: DisplayIdGenerator) -> list[Student]:
    """Keep the first holder of each display id; later repeats get a fresh one.

    Fresh ids avoid every stored id, so a record that was never duplicated keeps its own.
    """
    students = list(students)
    taken = {s.display_id for s in students}
    seen: set[str] = set()
    out: list[Student] = []
    for s in students:
        if s.display_id in seen:
            fresh = display_ids.new_display_id()
            while fresh in taken:
                fresh = display_ids.new_display_id()
            logger.warning("Duplicate display id %s on record %s, reassigned %s", s.display_id, s.internal_id, fresh)
            taken.add(fresh)
            s = Student(
                internal_id=s.internal_id,
                display_id=fresh,
                name=s.name,
                category=s.category,
                attendance=s.attendance,
            )
        seen.add(s.display_id)
        out.append(s)
    return out
