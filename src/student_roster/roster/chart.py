from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import NO_DATA_LABEL
from ..core.enums import AttendanceState
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ChartSlice:
    label: AttendanceState
    value: int


@dataclass(frozen=True)
class ChartData:
    """Everything a renderer needs for the attendance donut."""

    series: tuple[ChartSlice, ...]
    center_label: str
    percent_present: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "series": [{"label": s.label.value, "value": s.value} for s in self.series],
            "centerLabel": self.center_label,
            "percentPresent": self.percent_present,
        }


def percent_half_up(part: int, whole: int) -> int:
    # round(100 * part / whole) with .5 rounded up, in integer arithmetic
    return (200 * part + whole) // (2 * whole)


def build_chart(present: int, absent: int) -> ChartData:
    if present < 0 or absent < 0:
        raise ValidationError("Counts cannot be negative")

    total = present + absent
    if total == 0:
        return ChartData(series=(), center_label=NO_DATA_LABEL)

    candidates = (
        ChartSlice(AttendanceState.PRESENT, present),
        ChartSlice(AttendanceState.ABSENT, absent),
    )
    pct = percent_half_up(present, total)
    return ChartData(
        series=tuple(s for s in candidates if s.value > 0),
        center_label=f"{pct}% Present",
        percent_present=pct,
    )
