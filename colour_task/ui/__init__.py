"""Qt UI components for the colour match task."""

from .dialog_helpers import show_error, show_info
from .task_main_window import TaskMainWindow, TaskMode

__all__ = [
    "TaskMainWindow",
    "TaskMode",
    "show_error",
    "show_info",
]
