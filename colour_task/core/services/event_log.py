"""Append-only record of every interaction during a task."""

from __future__ import annotations

from collections.abc import Iterator

from colour_task.core.models import LogEntry


class EventLog:
    """Ordered click log; insertion order is also chronological order."""

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []

    def append(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    def entries(self) -> list[LogEntry]:
        """Return a copy of all entries in insertion order."""
        return list(self._entries)

    def last(self) -> LogEntry | None:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        """Drop every entry. Never called by the state machine itself."""
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))
