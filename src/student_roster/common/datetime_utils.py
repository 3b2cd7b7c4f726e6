from __future__ import annotations

import time


def now_millis() -> int:
    """Current epoch time in milliseconds.

    Note: Wrapped so tests can patch/mock easier.
    """
    return time.time_ns() // 1_000_000
