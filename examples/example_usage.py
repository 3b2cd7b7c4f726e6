"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

from student_roster.container import build_container
from student_roster.core.enums import AttendanceState, Category, FilterSelector
from student_roster.storage.slots import MemorySlotStore


def main():
    container = build_container(store=MemorySlotStore())
    roster = container.roster_service

    roster.add("Alice", Category.SCHOOL)
    bob = roster.add("Bob", Category.COLLEGE)
    roster.set_attendance(bob.internal_id, AttendanceState.ABSENT)
    view = roster.apply_filter(FilterSelector.COLLEGE)

    print([s.name for s in view.students])
    print(view.stats)
    print(view.chart.to_dict())


if __name__ == "__main__":
    main()
