from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import parse_choice
from ..core.enums import AttendanceState, Category, FilterSelector, ModalState
from ..core.exceptions import EditSessionError, ValidationError
from ..students.identifiers import DisplayIdGenerator, InternalIdGenerator
from ..students.model import Student
from ..students.repository import StudentRepository
from .edit import EditSession
from .state import RosterState, RosterView, derive

logger = logging.getLogger(__name__)


class RosterService:
    """CRUD over the canonical student list.

    Every accepted mutation builds the next ``RosterState``, persists it and only
    then publishes it together with its freshly derived view. Operations aimed at
    an unknown ``internal_id`` are no-ops.
    """

    def __init__(
        self,
        students: StudentRepository,
        *,
        internal_ids: Optional[InternalIdGenerator] = None,
        display_ids: Optional[DisplayIdGenerator] = None,
        default_attendance: AttendanceState = AttendanceState.ABSENT,
    ):
        self._students = students
        self._internal_ids = internal_ids or InternalIdGenerator()
        self._display_ids = display_ids or DisplayIdGenerator()
        self._default_attendance = default_attendance
        self._edit = EditSession()
        self._state = RosterState()
        self._view = derive(self._state)

    @property
    def state(self) -> RosterState:
        return self._state

    @property
    def view(self) -> RosterView:
        return self._view

    @property
    def edit(self) -> EditSession:
        return self._edit

    @property
    def default_attendance(self) -> AttendanceState:
        return self._default_attendance

    def _publish(self, state: RosterState) -> RosterView:
        self._state = state
        self._view = derive(state)
        return self._view

    def _commit(self, state: RosterState) -> RosterView:
        self._students.save(state.students)
        return self._publish(state)

    def load(self) -> RosterView:
        students = self._students.load()
        for s in students:
            self._internal_ids.observe(s.internal_id)
        logger.info("Roster loaded with %d students", len(students))
        return self._publish(self._state.with_students(students))

    # ----- filtering -----

    def apply_filter(self, selector) -> RosterView:
        selector = parse_choice(FilterSelector, selector, "Filter")
        return self._publish(self._state.with_filter(selector))

    def clear_filter(self) -> RosterView:
        return self.apply_filter(FilterSelector.ALL)

    def preview_filter(self, selector) -> RosterView:
        """View under ``selector`` without changing the current filter."""
        selector = parse_choice(FilterSelector, selector, "Filter")
        return derive(replace(self._state, current_filter=selector))

    # ----- CRUD -----

    def add(self, name: str, category=Category.SCHOOL) -> Optional[Student]:
        category = parse_choice(Category, category, "Category")
        if name is not None and not isinstance(name, str):
            raise ValidationError("Name must be text")
        clean = (name or "").strip()
        if not clean:
            logger.debug("Ignoring add with blank name")
            return None

        student = Student(
            internal_id=self._internal_ids.next_id(),
            display_id=self._display_ids.new_display_id(),
            name=clean,
            category=category,
            attendance=self._default_attendance,
        )
        self._commit(self._state.with_students(self._state.students + (student,)))
        logger.info("Added student %s (%s)", student.display_id, student.category.value)
        return student

    def delete(self, internal_id: int, *, confirmed: bool) -> bool:
        if not confirmed:
            return False
        return self.delete_confirmed(internal_id)

    def delete_confirmed(self, internal_id: int) -> bool:
        if self._state.index_of(internal_id) is None:
            return False
        remaining = [s for s in self._state.students if s.internal_id != internal_id]
        self._commit(self._state.with_students(remaining))
        logger.info("Deleted student %s", internal_id)
        return True

    def set_attendance(self, internal_id: int, attendance) -> bool:
        attendance = parse_choice(AttendanceState, attendance, "Attendance")
        idx = self._state.index_of(internal_id)
        if idx is None:
            return False

        students = list(self._state.students)
        students[idx] = replace(students[idx], attendance=attendance)
        self._commit(self._state.with_students(students))
        return True

    # ----- edit through a working copy -----

    def open_edit(self, internal_id: int) -> Optional[Student]:
        student = self._state.find(internal_id)
        if student is None:
            return None
        return self._edit.open(student)

    def update_edit(self, **patch) -> Student:
        return self._edit.update(**patch)

    def commit_edit(self) -> bool:
        draft = self._edit.draft
        if self._edit.state != ModalState.OPEN or draft is None:
            raise EditSessionError("No edit in progress")

        committed = False
        idx = self._state.index_of(draft.internal_id)
        if idx is not None:
            students = list(self._state.students)
            students[idx] = draft
            self._commit(self._state.with_students(students))
            committed = True
            logger.info("Saved edit of student %s", draft.internal_id)

        self._edit.begin_close()
        return committed

    def cancel_edit(self) -> bool:
        return self._edit.begin_close()

    def finalize_close(self) -> bool:
        return self._edit.finalize_close()
