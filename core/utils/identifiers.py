"""
Identifiers - Time-ordered UUID (version 7) generation.
"""

import os
import threading
import time
import uuid

_COUNTER_BITS = 12
_COUNTER_MAX = (1 << _COUNTER_BITS) - 1

_lock = threading.Lock()
_last_timestamp = 0
_counter = 0


def _next_timestamp_and_counter() -> tuple:
    global _last_timestamp, _counter

    with _lock:
        timestamp = time.time_ns() // 1_000_000

        if timestamp > _last_timestamp:
            # Seed the counter in the lower half so it has room to grow
            _counter = int.from_bytes(os.urandom(2), "big") & (_COUNTER_MAX >> 1)
            _last_timestamp = timestamp
        else:
            # Same millisecond or clock went backwards: keep ordering
            _counter += 1
            if _counter > _COUNTER_MAX:
                _last_timestamp += 1
                _counter = 0

        return _last_timestamp, _counter


def uuid7() -> uuid.UUID:
    """
    Generate a version 7 UUID as laid out in RFC 9562.

    The 48 most significant bits hold the unix timestamp in milliseconds,
    followed by a 12 bit counter and 62 random bits. Ids generated by the
    same process are strictly increasing.

    Returns:
        uuid.UUID: A new time-ordered identifier
    """
    timestamp, counter = _next_timestamp_and_counter()
    random_bits = int.from_bytes(os.urandom(8), "big") & ((1 << 62) - 1)

    value = (timestamp & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= counter << 64
    value |= 0b10 << 62
    value |= random_bits

    return uuid.UUID(int=value)


def timestamp_ms(identifier: uuid.UUID) -> int:
    """Return the unix millisecond timestamp embedded in a version 7 UUID."""
    return identifier.int >> 80
