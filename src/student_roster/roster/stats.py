from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import AttendanceState
from ..students.model import Student


@dataclass(frozen=True)
class RosterStats:
    total: int
    present: int
    absent: int

    def to_dict(self) -> dict:
        return {"total": self.total, "present": self.present, "absent": self.absent}


def summarize(subset: Iterable[Student]) -> RosterStats:
    present = 0
    absent = 0
    for s in subset:
        if s.attendance == AttendanceState.PRESENT:
            present += 1
        else:
            absent += 1
    return RosterStats(total=present + absent, present=present, absent=absent)
