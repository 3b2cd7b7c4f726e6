from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.validators import parse_choice
from .core.constants import DEFAULT_STORAGE_KEY
from .core.enums import AttendanceState
from .roster.service import RosterService
from .storage.file_store import FileSlotStore
from .storage.slots import SlotStore
from .students.identifiers import DisplayIdGenerator, InternalIdGenerator
from .students.json_repository import JsonSlotStudentRepository


@dataclass(frozen=True)
class Container:
    store: SlotStore
    students_repo: JsonSlotStudentRepository
    roster_service: RosterService


def build_container(
    *,
    data_dir: Optional[str] = None,
    store: Optional[SlotStore] = None,
    storage_key: str = DEFAULT_STORAGE_KEY,
    default_attendance: str = AttendanceState.ABSENT.value,
    internal_ids: Optional[InternalIdGenerator] = None,
    display_ids: Optional[DisplayIdGenerator] = None,
) -> Container:
    if store is None:
        if not data_dir:
            raise ValueError("Either data_dir or store is required")
        store = FileSlotStore(data_dir)

    internal_ids = internal_ids or InternalIdGenerator()
    display_ids = display_ids or DisplayIdGenerator()

    students_repo = JsonSlotStudentRepository(
        store,
        key=storage_key,
        internal_ids=internal_ids,
        display_ids=display_ids,
    )
    roster_service = RosterService(
        students_repo,
        internal_ids=internal_ids,
        display_ids=display_ids,
        default_attendance=parse_choice(AttendanceState, default_attendance, "DEFAULT_ATTENDANCE"),
    )
    roster_service.load()

    return Container(store=store, students_repo=students_repo, roster_service=roster_service)
