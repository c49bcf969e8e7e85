"""Application entry point for the ColourMatch task."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from colour_task.constants.task_constants import CLICK_LOG_DIRECTORY
from colour_task.core.slide_state_machine import SlideStateMachine
from colour_task.ui.task_main_window import TaskMainWindow
from colour_task.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, build the task state machine, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting ColourMatch task…")

    machine = SlideStateMachine()
    log_directory = Path(CLICK_LOG_DIRECTORY).resolve()
    logger.info("Click logs will be written to %s", log_directory)

    app = QApplication(sys.argv)
    window = TaskMainWindow(machine=machine, log_directory=log_directory)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
