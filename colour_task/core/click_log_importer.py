"""Read a saved click log back for inspection."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from pydantic import ValidationError

from colour_task.core.click_log_exporter import CLICK_LOG_ADAPTER, ClickLogRecord


class ClickLogError(Exception):
    """Raised when a click log file cannot be parsed."""


def load_click_log(file_path: Path) -> list[ClickLogRecord]:
    try:
        text = file_path.read_text(encoding="utf-8")
        records = CLICK_LOG_ADAPTER.validate_json(text)
    except UnicodeDecodeError as exc:
        raise ClickLogError(f"{file_path.name} is not UTF-8 encoded text.") from exc
    except ValidationError as exc:
        raise ClickLogError(
            f"{file_path.name} is not a valid click log ({exc.error_count()} problem(s))."
        ) from exc
    if not records:
        raise ClickLogError(f"{file_path.name} does not contain any click log entries.")
    return records


def count_events(records: list[ClickLogRecord]) -> dict[str, int]:
    """Number of records per event kind, in order of first appearance."""
    return dict(Counter(record.event.value for record in records))
