"""Countdown clock for the slide currently on screen."""

from __future__ import annotations

import math
import time
from collections.abc import Callable

TimeSource = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class SessionClock:
    """Deadline-based countdown driven by a millisecond time source.

    The clock never pauses; callers that no longer care about expiry simply
    stop asking.
    """

    def __init__(self, time_source: TimeSource) -> None:
        self._now = time_source
        self._duration_seconds: float = 0.0
        self._deadline_ms: float | None = None

    def start(self, duration_seconds: float) -> None:
        if duration_seconds <= 0:
            raise ValueError("Slide duration must be positive.")
        self._duration_seconds = duration_seconds
        self._deadline_ms = self._now() + duration_seconds * 1000

    def remaining(self) -> float:
        """Seconds left before the deadline, never negative."""
        if self._deadline_ms is None:
            return 0.0
        return max(0.0, (self._deadline_ms - self._now()) / 1000)

    def expired(self) -> bool:
        return self._deadline_ms is not None and self.remaining() == 0

    def display_seconds(self) -> int:
        return math.ceil(self.remaining())

    def fraction(self) -> float:
        if self._duration_seconds <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining() / self._duration_seconds))
