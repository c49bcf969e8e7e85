"""Component for the start screen shown before the task begins."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from colour_task.constants.ui_constants import (
    ABOUT_BUTTON,
    LOAD_LOG_BUTTON,
    START_BUTTON,
    START_HINT,
    START_TITLE,
)
from colour_task.styling.color_palette import ColorPalette
from colour_task.styling.styles import Styles


class StartPanel(QWidget):
    """Title screen with the START TASK button."""

    def __init__(
        self,
        on_start: Callable[[], None],
        on_about: Callable[[], None],
        on_load_log: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self.on_about = on_about
        self.on_load_log = on_load_log

        self._build_ui()

    def _build_ui(self) -> None:
        self.setObjectName("startPanel")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(Styles.get_screen_style("startPanel", ColorPalette.START_SCREEN))

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(START_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style(30))
        layout.addWidget(self.title_label)

        self.hint_label = QLabel(START_HINT, self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        self.hint_label.setStyleSheet(Styles.get_caption_style(ColorPalette.TEXT_SECONDARY, 14))
        layout.addWidget(self.hint_label)

        layout.addStretch()

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start)
        button_row.addWidget(self.start_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        button_row.addWidget(self.about_button)

        self.load_log_button = QPushButton(LOAD_LOG_BUTTON, self)
        self.load_log_button.clicked.connect(self.on_load_log)
        button_row.addWidget(self.load_log_button)
        button_row.addStretch()
        layout.addLayout(button_row)
