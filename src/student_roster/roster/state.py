from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import FilterSelector
from ..students.model import Student
from .chart import ChartData, build_chart
from .filters import apply_filter
from .stats import RosterStats, summarize


@dataclass(frozen=True)
class RosterState:
    """Owned application state; every accepted mutation yields a new version."""

    students: tuple[Student, ...] = ()
    current_filter: FilterSelector = FilterSelector.ALL
    version: int = 0

    def index_of(self, internal_id: int) -> Optional[int]:
        for i, s in enumerate(self.students):
            if s.internal_id == internal_id:
                return i
        return None

    def find(self, internal_id: int) -> Optional[Student]:
        idx = self.index_of(internal_id)
        return None if idx is None else self.students[idx]

    def with_students(self, students) -> "RosterState":
        return replace(self, students=tuple(students), version=self.version + 1)

    def with_filter(self, selector: FilterSelector) -> "RosterState":
        return replace(self, current_filter=selector, version=self.version + 1)


@dataclass(frozen=True)
class RosterView:
    """Derived, disposable read-model of a ``RosterState``."""

    current_filter: FilterSelector
    students: tuple[Student, ...]
    stats: RosterStats
    chart: ChartData
    version: int = 0

    def to_dict(self) -> dict:
        return {
            "filter": self.current_filter.value,
            "students": [s.to_dict() for s in self.students],
            "stats": self.stats.to_dict(),
            "chart": self.chart.to_dict(),
            "version": self.version,
        }


def derive(state: RosterState) -> RosterView:
    visible = tuple(apply_filter(state.students, state.current_filter))
    stats = summarize(visible)
    return RosterView(
        current_filter=state.current_filter,
        students=visible,
        stats=stats,
        chart=build_chart(stats.present, stats.absent),
        version=state.version,
    )
