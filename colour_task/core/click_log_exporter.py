"""Utilities for saving the click log as the JSON file used for analysis.

File format: a JSON array with one object per logged interaction, in the order
they happened. Every object carries ``event``, ``timeMs``, ``slideIndex`` and
``selectedIndex``; colour clicks add ``colourIndex``/``colourName`` and the
All Agree / timer events add ``hadSelection``, ``chosenColourIndex`` and
``chosenColourName``. Missing selections are written as ``-1``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from colour_task.core.models import EventKind, LogEntry

logger = logging.getLogger(__name__)

NO_SELECTION_INDEX = -1
_INDEX_FIELDS = frozenset({"colourIndex", "chosenColourIndex"})


class ClickLogRecord(BaseModel):
    """One entry of the click log file."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    event: EventKind
    time_ms: float = Field(alias="timeMs", ge=0)
    slide_index: int = Field(alias="slideIndex", ge=0)
    selected_index: int = Field(alias="selectedIndex", ge=NO_SELECTION_INDEX)


CLICK_LOG_ADAPTER = TypeAdapter(list[ClickLogRecord])


def save_click_log(file_path: Path, entries: list[LogEntry]) -> Path:
    """Persist the click log to disk and return the resolved path."""

    if not entries:
        raise ValueError("Cannot save an empty click log.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    records = [_to_record(entry) for entry in entries]
    file_path.write_bytes(CLICK_LOG_ADAPTER.dump_json(records, by_alias=True, indent=2))
    logger.info("Saved %d click log entries to %s", len(records), file_path)
    return file_path


def _to_record(entry: LogEntry) -> ClickLogRecord:
    extra = {
        key: (NO_SELECTION_INDEX if key in _INDEX_FIELDS and value is None else value)
        for key, value in entry.extra.items()
    }
    return ClickLogRecord(
        event=entry.event,
        time_ms=entry.time_ms,
        slide_index=entry.slide_index,
        selected_index=_index_or_sentinel(entry.selected_index),
        **extra,
    )


def _index_or_sentinel(index: int | None) -> int:
    return NO_SELECTION_INDEX if index is None else index
