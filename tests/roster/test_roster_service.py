from __future__ import annotations

import json

import pytest

from student_roster.core.enums import AttendanceState, Category, FilterSelector, ModalState
from student_roster.core.exceptions import EditSessionError, StorageError, ValidationError
from student_roster.roster.chart import ChartSlice
from student_roster.roster.service import RosterService
from student_roster.roster.stats import RosterStats


def _persisted(store):
    return json.loads(store.get_item("students"))


def test_scenario_filter_college_after_marking_bob_absent(service):
    service.add("Alice", "School")
    bob = service.add("Bob", Category.COLLEGE)
    service.set_attendance(bob.internal_id, AttendanceState.ABSENT)

    view = service.apply_filter(FilterSelector.COLLEGE)

    assert [s.name for s in view.students] == ["Bob"]
    assert view.stats == RosterStats(total=1, present=0, absent=1)
    assert view.chart.series == (ChartSlice(AttendanceState.ABSENT, 1),)
    assert view.chart.center_label == "0% Present"


def test_add_persists_and_uses_default_attendance(service, store):
    student = service.add("  Alice  ", "College")

    assert student.name == "Alice"
    assert student.attendance == AttendanceState.ABSENT
    assert student.display_id.startswith("STU-")
    assert _persisted(store) == [student.to_dict()]
    assert service.view.students == (student,)


def test_default_attendance_is_configurable(repo, internal_ids, display_ids):
    svc = RosterService(repo, internal_ids=internal_ids, display_ids=display_ids, default_attendance=AttendanceState.PRESENT)

    assert svc.add("Alice").attendance == AttendanceState.PRESENT


def test_rapid_adds_get_distinct_ids(service):
    students = [service.add(f"S{i}") for i in range(5)]

    assert len({s.internal_id for s in students}) == 5
    assert len({s.display_id for s in students}) == 5


def test_blank_name_is_silently_rejected(service, store):
    before = store.get_item("students")

    assert service.add("   ", "School") is None
    assert service.state.students == ()
    assert store.get_item("students") == before


def test_unknown_category_is_a_validation_error(service):
    with pytest.raises(ValidationError):
        service.add("Alice", "University")


def test_stale_attendance_update_changes_nothing(service, store):
    service.add("Alice")
    snapshot = (store.get_item("students"), service.state, service.view)

    assert service.set_attendance(999, AttendanceState.ABSENT) is False

    assert (store.get_item("students"), service.state, service.view) == snapshot


def test_mutations_rederive_under_the_current_filter(service):
    service.apply_filter("Present")
    alice = service.add("Alice")
    assert service.view.students == ()

    service.set_attendance(alice.internal_id, "Present")

    assert [s.name for s in service.view.students] == ["Alice"]
    assert service.view.stats == RosterStats(1, 1, 0)
    assert service.view.current_filter == FilterSelector.PRESENT


def test_stats_follow_the_filtered_view_not_the_whole_roster(service):
    a = service.add("A", "School")
    service.add("B", "College")
    service.set_attendance(a.internal_id, "Present")

    assert service.apply_filter("School").stats == RosterStats(1, 1, 0)
    assert service.clear_filter().stats == RosterStats(2, 1, 1)


def test_delete_needs_confirmation(service, store):
    alice = service.add("Alice")
    version = service.state.version
    before = store.get_item("students")

    assert service.delete(alice.internal_id, confirmed=False) is False
    assert service.state.version == version
    assert store.get_item("students") == before

    assert service.delete(alice.internal_id, confirmed=True) is True
    assert service.state.students == ()
    assert _persisted(store) == []


def test_delete_unknown_id_is_a_no_op(service):
    service.add("Alice")
    version = service.state.version

    assert service.delete_confirmed(12345) is False
    assert service.state.version == version


def test_edit_is_invisible_until_committed(service, store):
    alice = service.add("Alice")
    service.open_edit(alice.internal_id)
    service.update_edit(name="Alicia", category="College")

    assert service.view.students[0].name == "Alice"
    assert _persisted(store)[0]["name"] == "Alice"

    assert service.commit_edit() is True
    assert service.view.students[0].name == "Alicia"
    assert service.view.students[0].category == Category.COLLEGE
    assert _persisted(store)[0]["name"] == "Alicia"
    assert service.edit.state == ModalState.CLOSING

    service.finalize_close()
    assert service.edit.draft is None


def test_cancel_discards_the_working_copy(service):
    alice = service.add("Alice")
    service.open_edit(alice.internal_id)
    service.update_edit(name="Changed")

    service.cancel_edit()
    service.finalize_close()

    assert service.state.students[0].name == "Alice"
    assert service.edit.state == ModalState.CLOSED


def test_commit_after_record_was_deleted_only_closes(service):
    alice = service.add("Alice")
    service.open_edit(alice.internal_id)
    service.delete_confirmed(alice.internal_id)
    version = service.state.version

    assert service.commit_edit() is False
    assert service.state.version == version
    assert service.edit.state == ModalState.CLOSING


def test_commit_without_open_edit_raises(service):
    with pytest.raises(EditSessionError):
        service.commit_edit()


def test_open_edit_unknown_id(service):
    assert service.open_edit(42) is None
    assert service.edit.state == ModalState.CLOSED


def test_load_primes_ids_from_storage(store, internal_ids, display_ids, repo, clock):
    store.set_item("students", json.dumps([{"internalId": clock() + 500, "displayId": "STU-AAAA0000", "name": "Old"}]))
    svc = RosterService(repo, internal_ids=internal_ids, display_ids=display_ids)
    svc.load()

    assert svc.add("New").internal_id == clock() + 501


class FailingRepo:
    def load(self):
        return []

    def save(self, students):
        raise StorageError("disk full")


def test_failed_save_leaves_published_state_untouched(internal_ids, display_ids):
    svc = RosterService(FailingRepo(), internal_ids=internal_ids, display_ids=display_ids)
    svc.load()
    state, view = svc.state, svc.view

    with pytest.raises(StorageError):
        svc.add("Alice")

    assert svc.state is state
    assert svc.view is view


def test_non_text_name_is_a_validation_error(service):
    with pytest.raises(ValidationError):
        service.add(42, "School")
    assert service.state.students == ()


def test_preview_filter_leaves_state_alone(service):
    service.add("Alice", "School")
    service.add("Bob", "College")
    state = service.state

    preview = service.preview_filter("College")

    assert [s.name for s in preview.students] == ["Bob"]
    assert service.state is state
    assert service.view.current_filter == FilterSelector.ALL
