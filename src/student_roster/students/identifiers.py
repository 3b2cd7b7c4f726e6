from __future__ import annotations

import random
import string
from typing import Callable, Optional

from ..common.datetime_utils import now_millis
from ..core.constants import DISPLAY_ID_PREFIX, DISPLAY_ID_RANDOM_CHARS, DISPLAY_ID_TIME_CHARS

BASE36_ALPHABET = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    if value < 0:
        return "-" + to_base36(-value)
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


class DisplayIdGenerator:
    """Human-friendly ids: ``STU-`` + 4 time chars + 4 random chars.

    No collision check here; duplicates are repaired when the store loads.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], int] = now_millis,
        rng: Optional[random.Random] = None,
    ):
        self._clock = clock
        self._rng = rng or random.Random()

    def new_display_id(self) -> str:
        time_part = to_base36(int(self._clock()))[-DISPLAY_ID_TIME_CHARS:].rjust(DISPLAY_ID_TIME_CHARS, "0")
        random_part = "".join(self._rng.choice(BASE36_ALPHABET) for _ in range(DISPLAY_ID_RANDOM_CHARS))
        return f"{DISPLAY_ID_PREFIX}{time_part}{random_part}"


class InternalIdGenerator:
    """Epoch-millisecond ids, bumped so that every issued id is strictly larger."""

    def __init__(self, *, clock: Callable[[], int] = now_millis):
        self._clock = clock
        self._last = 0

    def observe(self, existing_id: int) -> None:
        """Never issue an id at or below ``existing_id``."""
        if existing_id > self._last:
            self._last = int(existing_id)

    def next_id(self) -> int:
        candidate = max(int(self._clock()), self._last + 1)
        self._last = candidate
        return candidate
