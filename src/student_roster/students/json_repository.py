from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..core.constants import CORRUPT_SLOT_SUFFIX, DEFAULT_STORAGE_KEY
from ..storage.slots import SlotStore
from .identifiers import DisplayIdGenerator, InternalIdGenerator
from .migration import dedupe_display_ids, normalize, raw_internal_id
from .model import Student

logger = logging.getLogger(__name__)


class JsonSlotStudentRepository:
    """Students persisted as a JSON array in a single named slot.

    ``load`` migrates whatever it finds and writes the repaired list straight
    back, so the stored form heals itself.
    """

    def __init__(
        self,
        store: SlotStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        internal_ids: Optional[InternalIdGenerator] = None,
        display_ids: Optional[DisplayIdGenerator] = None,
    ):
        self._store = store
        self._key = key
        self._internal_ids = internal_ids or InternalIdGenerator()
        self._display_ids = display_ids or DisplayIdGenerator()

    def _read_entries(self) -> list[dict]:
        raw = self._store.get_item(self._key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            data = None

        if not isinstance(data, list):
            logger.warning("Slot %r does not hold a JSON array, starting from an empty roster", self._key)
            self._store.set_item(self._key + CORRUPT_SLOT_SUFFIX, raw)
            return []

        entries: list[dict] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object entry #%d in slot %r", index, self._key)
                continue
            entries.append(item)
        return entries

    def load(self) -> list[Student]:
        entries = self._read_entries()

        # Ids generated for incomplete entries must not collide with stored ones.
        for entry in entries:
            existing = raw_internal_id(entry)
            if existing is not None:
                self._internal_ids.observe(existing)

        students = [
            normalize(e, internal_ids=self._internal_ids, display_ids=self._display_ids) for e in entries
        ]
        students = self._dedupe_internal_ids(students)
        students = dedupe_display_ids(students, display_ids=self._display_ids)

        self.save(students)
        logger.debug("Loaded %d students from slot %r", len(students), self._key)
        return students

    def _dedupe_internal_ids(self, students: list[Student]) -> list[Student]:
        """Later holders of an already used internal id get a fresh one."""
        seen: set[int] = set()
        out: list[Student] = []
        for s in students:
            if s.internal_id in seen:
                fresh = self._internal_ids.next_id()
                logger.warning("Duplicate internal id %s, reassigned %s", s.internal_id, fresh)
                s = replace(s, internal_id=fresh)
            seen.add(s.internal_id)
            out.append(s)
        return out

    def save(self, students: Sequence[Student]) -> None:
        payload = json.dumps([s.to_dict() for s in students], ensure_ascii=False)
        self._store.set_item(self._key, payload)
