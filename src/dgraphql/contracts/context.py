"""Per-call context carrying the caller's deadline."""

from __future__ import annotations

import time
from dataclasses import dataclass

DEFAULT_TIMEOUT = 20.0


def now_ms() -> int:
    """Return current epoch time in milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CallContext:
    """Caller-side bounds for a single execute call.

    Attributes:
        deadline_ms: Absolute epoch ms after which the call must be abandoned.
    """

    deadline_ms: int | None = None

    @classmethod
    def with_timeout(cls, seconds: float) -> CallContext:
        return cls(deadline_ms=now_ms() + int(seconds * 1000))

    def remaining_ms(self) -> int | None:
        """Return non-negative ms remaining until the deadline, or None."""
        if self.deadline_ms is None:
            return None
        return max(0, self.deadline_ms - now_ms())

    def effective_timeout(self, ceiling: float) -> float:
        """Intersect the caller's deadline with *ceiling* (seconds); the tighter one wins."""
        remaining = self.remaining_ms()
        if remaining is None:
            return ceiling
        return min(ceiling, remaining / 1000.0)
