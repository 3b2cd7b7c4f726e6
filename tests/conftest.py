from __future__ import annotations

import random

import pytest

from student_roster.roster.service import RosterService
from student_roster.storage.slots import MemorySlotStore
from student_roster.students.identifiers import DisplayIdGenerator, InternalIdGenerator
from student_roster.students.json_repository import JsonSlotStudentRepository

FIXED_MS = 1_700_000_000_000


class FakeClock:
    def __init__(self, now_ms: int = FIXED_MS):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int = 1) -> None:
        self.now_ms += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def internal_ids(clock):
    return InternalIdGenerator(clock=clock)


@pytest.fixture
def display_ids(clock):
    return DisplayIdGenerator(clock=clock, rng=random.Random(1234))


@pytest.fixture
def store():
    return MemorySlotStore()


@pytest.fixture
def repo(store, internal_ids, display_ids):
    return JsonSlotStudentRepository(store, internal_ids=internal_ids, display_ids=display_ids)


@pytest.fixture
def service(repo, internal_ids, display_ids):
    svc = RosterService(repo, internal_ids=internal_ids, display_ids=display_ids)
    svc.load()
    return svc
