"""Identifier and time helpers used when building question cards."""

import time
import uuid


def new_id() -> str:
    """Return a standard 36-character UUID string."""
    return str(uuid.uuid4())


def now_millis() -> int:
    """Wall-clock timestamp in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def now_monotonic_nanos() -> int:
    """Monotonic timestamp in nanoseconds, for elapsed measurements."""
    return time.monotonic_ns()


def elapsed_millis(start_nanos: int, end_nanos: int | None = None) -> int:
    """Elapsed milliseconds between two monotonic readings (never negative)."""
    if end_nanos is None:
        end_nanos = now_monotonic_nanos()
    return max(0, end_nanos - start_nanos) // 1_000_000


def format_duration_ms(ms: int) -> str:
    """Format a duration like "1:23.045" (m:ss.mmm)."""
    minutes = ms // 60_000
    seconds = (ms % 60_000) // 1_000
    millis = ms % 1_000
    return f"{minutes}:{seconds:02d}.{millis:03d}"
