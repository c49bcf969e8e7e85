import pytest

from colour_task.core.models import EventKind, LogEntry
from colour_task.core.services.event_log import EventLog


def _entry(kind: EventKind, time_ms: float) -> LogEntry:
    return LogEntry(event=kind, time_ms=time_ms, slide_index=0, selected_index=None)


def test_entries_keep_insertion_order():
    log = EventLog()
    log.append(_entry(EventKind.START_GAME, 0))
    log.append(_entry(EventKind.COLOUR_CLICK, 5))
    log.append(_entry(EventKind.ALL_AGREE, 9))

    assert [entry.event for entry in log.entries()] == [
        EventKind.START_GAME,
        EventKind.COLOUR_CLICK,
        EventKind.ALL_AGREE,
    ]
    assert len(log) == 3
    assert log.last().event is EventKind.ALL_AGREE


def test_entries_returns_a_copy():
    log = EventLog()
    log.append(_entry(EventKind.START_GAME, 0))

    snapshot = log.entries()
    snapshot.clear()

    assert len(log) == 1


def test_empty_log():
    log = EventLog()

    assert log.last() is None
    assert list(log) == []


def test_entry_extras_are_read_only_copies():
    details = {"colourIndex": 2, "colourName": "Colour 3"}
    entry = LogEntry(
        event=EventKind.COLOUR_CLICK,
        time_ms=0,
        slide_index=0,
        selected_index=2,
        extra=details,
    )
    details["colourIndex"] = 7

    assert entry.extra == {"colourIndex": 2, "colourName": "Colour 3"}
    with pytest.raises(TypeError):
        entry.extra["colourIndex"] = 99
