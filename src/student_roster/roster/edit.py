from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ..common.validators import parse_choice
from ..core.enums import AttendanceState, Category, ModalState
from ..core.exceptions import EditSessionError, ValidationError
from ..students.model import Student

EDITABLE_FIELDS = ("name", "category", "attendance")


class EditSession:
    """Working copy of one student plus the modal lifecycle around it.

    Closed -> Open (``open``) -> Closing (``begin_close``) -> Closed (``finalize_close``).
    The presentation layer calls ``finalize_close`` once its exit animation is done.
    """

    def __init__(self):
        self._state = ModalState.CLOSED
        self._draft: Optional[Student] = None

    @property
    def state(self) -> ModalState:
        return self._state

    @property
    def draft(self) -> Optional[Student]:
        return self._draft

    @property
    def is_visible(self) -> bool:
        return self._state != ModalState.CLOSED

    def open(self, student: Student) -> Student:
        self._draft = replace(student)
        self._state = ModalState.OPEN
        return self._draft

    def update(self, **patch) -> Student:
        if self._state != ModalState.OPEN or self._draft is None:
            raise EditSessionError("No edit in progress")

        unknown = set(patch) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields not editable: {', '.join(sorted(unknown))}")

        changes = {}
        if "name" in patch:
            changes["name"] = "" if patch["name"] is None else str(patch["name"])
        if "category" in patch:
            changes["category"] = parse_choice(Category, patch["category"], "Category")
        if "attendance" in patch:
            changes["attendance"] = parse_choice(AttendanceState, patch["attendance"], "Attendance")

        self._draft = replace(self._draft, **changes)
        return self._draft

    def begin_close(self) -> bool:
        if self._state != ModalState.OPEN:
            return False
        self._state = ModalState.CLOSING
        return True

    def finalize_close(self) -> bool:
        if self._state != ModalState.CLOSING:
            return False
        self._state = ModalState.CLOSED
        self._draft = None
        return True

    def to_dict(self) -> dict:
        return {
            "state": self._state.value,
            "draft": self._draft.to_dict() if self._draft else None,
        }
