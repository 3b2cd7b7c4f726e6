from __future__ import annotations

import pytest

from student_roster.core.enums import AttendanceState, Category, ModalState
from student_roster.core.exceptions import EditSessionError, ValidationError
from student_roster.roster.edit import EditSession
from student_roster.students.model import Student

AN = Student(1, "STU-0001AAAA", "An", Category.SCHOOL, AttendanceState.ABSENT)


def test_starts_closed():
    session = EditSession()

    assert session.state == ModalState.CLOSED
    assert session.draft is None
    assert not session.is_visible


def test_updates_touch_only_the_working_copy():
    session = EditSession()
    session.open(AN)

    draft = session.update(name="An Nguyen", category="College", attendance=AttendanceState.PRESENT)

    assert draft.name == "An Nguyen"
    assert draft.category == Category.COLLEGE
    assert draft.attendance == AttendanceState.PRESENT
    assert draft.internal_id == AN.internal_id
    assert AN.name == "An"


def test_two_phase_close():
    session = EditSession()
    session.open(AN)

    assert session.begin_close()
    assert session.state == ModalState.CLOSING
    assert session.is_visible
    assert session.draft is not None

    assert session.finalize_close()
    assert session.state == ModalState.CLOSED
    assert session.draft is None


def test_out_of_order_transitions_are_ignored():
    session = EditSession()

    assert not session.begin_close()
    assert not session.finalize_close()

    session.open(AN)
    assert not session.finalize_close()
    assert session.state == ModalState.OPEN


def test_update_requires_open_modal():
    session = EditSession()
    with pytest.raises(EditSessionError):
        session.update(name="x")

    session.open(AN)
    session.begin_close()
    with pytest.raises(EditSessionError):
        session.update(name="x")


def test_reopening_while_closing_wins_over_the_pending_finalize():
    session = EditSession()
    session.open(AN)
    session.begin_close()

    session.open(AN)
    session.finalize_close()

    assert session.state == ModalState.OPEN
    assert session.draft == AN


def test_bad_patches_are_rejected():
    session = EditSession()
    session.open(AN)

    with pytest.raises(ValidationError):
        session.update(internal_id=99)
    with pytest.raises(ValidationError):
        session.update(category="University")
    assert session.draft == AN
