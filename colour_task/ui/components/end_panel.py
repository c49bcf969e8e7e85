"""Component for the END OF TASK screen."""

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
    END_ACCURACY_TEMPLATE,
    END_ANSWERED_TEMPLATE,
    END_TITLE,
    RESTART_BUTTON,
)
from colour_task.core.services.session_summary import SessionSummary
from colour_task.styling.color_palette import ColorPalette
from colour_task.styling.styles import Styles


class EndPanel(QWidget):
    """Shows the answered count and accuracy, plus a restart button."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        self.setObjectName("endPanel")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(Styles.get_screen_style("endPanel", ColorPalette.END_SCREEN))

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(END_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_title_style(34))
        layout.addWidget(self.title_label)

        caption_style = Styles.get_caption_style(ColorPalette.TEXT_SECONDARY, 16)
        self.answered_label = QLabel("", self)
        self.answered_label.setAlignment(Qt.AlignCenter)
        self.answered_label.setStyleSheet(caption_style)
        layout.addWidget(self.answered_label)

        self.accuracy_label = QLabel("", self)
        self.accuracy_label.setAlignment(Qt.AlignCenter)
        self.accuracy_label.setStyleSheet(caption_style)
        layout.addWidget(self.accuracy_label)

        layout.addStretch()

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.restart_button = QPushButton(RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        button_row.addWidget(self.restart_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        self.show_summary(None)

    def show_summary(self, summary: SessionSummary | None) -> None:
        answered = summary.answered if summary else 0
        percentage = summary.percentage if summary else 0
        self.answered_label.setText(END_ANSWERED_TEMPLATE.format(answered=answered))
        self.accuracy_label.setText(END_ACCURACY_TEMPLATE.format(percentage=percentage))
