"""Qt main window switching between the start, slide and end screens."""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QFileDialog, QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from colour_task.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from colour_task.constants.task_constants import (
    AUTO_SAVE_FILENAME,
    CLICK_LOG_DIRECTORY,
    MANUAL_SAVE_FILENAME,
)
from colour_task.constants.ui_constants import (
    LOAD_FAILED_TITLE,
    LOAD_LOG_DIALOG_TITLE,
    LOAD_LOG_FILE_FILTER,
    LOADED_LOG_TITLE,
    NOTHING_TO_SAVE_MESSAGE,
    SAVE_FAILED_TITLE,
    TICK_INTERVAL_MS,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
    WINDOW_TITLE,
)
from colour_task.core.click_log_exporter import save_click_log
from colour_task.core.click_log_importer import ClickLogError, count_events, load_click_log
from colour_task.core.models import LogEntry, SlidePhase
from colour_task.core.slide_state_machine import SlideStateMachine
from colour_task.styling.styles import Styles
from colour_task.ui.components.end_panel import EndPanel
from colour_task.ui.components.slide_panel import SlidePanel
from colour_task.ui.components.start_panel import StartPanel
from colour_task.ui.dialog_helpers import show_error, show_info

logger = logging.getLogger(__name__)


class TaskMode(Enum):
    """Screen currently shown by the main window."""

    START = auto()
    SLIDES = auto()
    END = auto()


class TaskMainWindow(QMainWindow):
    """Main Qt window forwarding user input to the slide state machine."""

    def __init__(self, machine: SlideStateMachine, log_directory: Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.machine = machine
        self.log_directory = log_directory or Path(CLICK_LOG_DIRECTORY)
        self.machine.set_log_sink(self._auto_save_click_log)

        self._mode: TaskMode | None = None

        self._build_ui()
        self._configure_shortcuts()
        self._configure_tick_timer()
        self.setStyleSheet(Styles.get_main_window_style())
        self._sync_mode()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.start_panel = StartPanel(
            on_start=self._handle_start,
            on_about=self._handle_about,
            on_load_log=self._handle_load_log,
            parent=self,
        )
        self.slide_panel = SlidePanel(self.machine, on_confirm=self._handle_confirm, parent=self)
        self.end_panel = EndPanel(on_restart=self._handle_restart, parent=self)

        self.mode_stack.addWidget(self.start_panel)
        self.mode_stack.addWidget(self.slide_panel)
        self.mode_stack.addWidget(self.end_panel)
        root_layout.addWidget(self.mode_stack)

    def _configure_shortcuts(self) -> None:
        self.confirm_shortcut = QShortcut(QKeySequence("Right"), self)
        self.confirm_shortcut.activated.connect(self._handle_confirm)

        self.save_shortcut = QShortcut(QKeySequence("S"), self)
        self.save_shortcut.activated.connect(self._handle_manual_save)

        self.dump_shortcut = QShortcut(QKeySequence("L"), self)
        self.dump_shortcut.activated.connect(self._handle_dump_log)

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._tick)
        self.tick_timer.start()

    def _tick(self) -> None:
        self.machine.tick()
        self._sync_mode()

    def _sync_mode(self) -> None:
        phase = self.machine.phase
        if phase is SlidePhase.NOT_STARTED:
            mode = TaskMode.START
        elif phase is SlidePhase.ENDED:
            mode = TaskMode.END
        else:
            mode = TaskMode.SLIDES

        if mode != self._mode:
            self._set_mode(mode)
        if mode == TaskMode.SLIDES:
            self.slide_panel.refresh()

    def _set_mode(self, mode: TaskMode) -> None:
        self._mode = mode
        index_map = {
            TaskMode.START: 0,
            TaskMode.SLIDES: 1,
            TaskMode.END: 2,
        }
        if mode == TaskMode.END:
            self.end_panel.show_summary(self.machine.summary)
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_start(self) -> None:
        self.machine.start()
        self._sync_mode()

    def _handle_confirm(self) -> None:
        if self._mode != TaskMode.SLIDES:
            return
        self.machine.confirm()
        self._sync_mode()

    def _handle_restart(self) -> None:
        self.machine.reset()
        self._sync_mode()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"{HELP_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_load_log(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            LOAD_LOG_DIALOG_TITLE,
            str(self.log_directory.resolve()),
            LOAD_LOG_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            records = load_click_log(Path(file_path))
        except (OSError, ClickLogError) as exc:
            show_error(self, LOAD_FAILED_TITLE, str(exc))
            return

        breakdown = "\n".join(
            f"{event}: {count}" for event, count in count_events(records).items()
        )
        show_info(
            self,
            LOADED_LOG_TITLE,
            f"{Path(file_path).name} contains {len(records)} entries.\n\n{breakdown}",
        )

    def _handle_manual_save(self) -> None:
        entries = self.machine.get_event_log()
        if not entries:
            show_info(self, "Click log", NOTHING_TO_SAVE_MESSAGE)
            return
        self._write_click_log(MANUAL_SAVE_FILENAME, entries)

    def _handle_dump_log(self) -> None:
        entries = self.machine.get_event_log()
        logger.info("Click log (%d entries):", len(entries))
        for entry in entries:
            logger.info(
                "  %s t=%.0fms slide=%d selected=%s %s",
                entry.event.value,
                entry.time_ms,
                entry.slide_index,
                entry.selected_index,
                dict(entry.extra),
            )

    def _auto_save_click_log(self, entries: list[LogEntry]) -> None:
        self._write_click_log(AUTO_SAVE_FILENAME, entries)

    def _write_click_log(self, filename: str, entries: list[LogEntry]) -> None:
        try:
            save_click_log(self.log_directory / filename, entries)
        except (OSError, ValueError) as exc:
            logger.exception("Could not save click log to %s", self.log_directory / filename)
            show_error(self, SAVE_FAILED_TITLE, str(exc))
