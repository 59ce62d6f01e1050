"""Identity generation for aggregates.

Identities are UUID version 7: a 48-bit Unix timestamp in milliseconds,
a 12-bit counter, then random bits.  Within one process every new id
sorts after the previous one, even when several are created in the same
millisecond, so ordering by id is ordering by creation.
"""

from __future__ import annotations

import os
import threading
import time
from uuid import UUID

_VERSION = 0x7
_VARIANT = 0b10
_COUNTER_MAX = 0xFFF

_lock = threading.Lock()
_last_ms = 0
_counter = 0


def _next_tick() -> tuple[int, int]:
    global _last_ms, _counter
    with _lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms > _last_ms:
            _last_ms = now_ms
            # Start low in the counter range to leave room for increments.
            _counter = int.from_bytes(os.urandom(2), "big") & 0x3FF
        elif _counter < _COUNTER_MAX:
            _counter += 1
        else:
            # Counter exhausted: borrow the next millisecond.
            _last_ms += 1
            _counter = 0
        return _last_ms, _counter


def new_id() -> UUID:
    """Return a fresh time-ordered identity."""
    timestamp_ms, rand_a = _next_tick()
    rand_b = int.from_bytes(os.urandom(8), "big") & ((1 << 62) - 1)

    value = (timestamp_ms & 0xFFFF_FFFF_FFFF) << 80
    value |= _VERSION << 76
    value |= rand_a << 64
    value |= _VARIANT << 62
    value |= rand_b
    return UUID(int=value)
