"""Lane and card ID generation."""

import time
from collections.abc import Collection


def epoch_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def make_id(kind: str, taken: Collection[str] = (), now: int | None = None) -> str:
    """Generate a fresh ``"<kind>-<epochMillis>"`` ID.

    If the ID for this millisecond is already taken, the millisecond is
    bumped until it isn't, so a burst of creations within one tick (or
    imported ids from the future) never collide.
    """
    millis = epoch_millis() if now is None else now
    candidate = f"{kind}-{millis}"
    while candidate in taken:
        millis += 1
        candidate = f"{kind}-{millis}"
    return candidate
