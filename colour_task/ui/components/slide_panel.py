"""Component for the slide screen where the group picks a colour."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from colour_task.constants.ui_constants import (
    ALL_AGREE_BUTTON,
    FEEDBACK_CROSS,
    FEEDBACK_TICK,
    SLIDE_COUNTER_TEMPLATE,
    TIME_LEFT_TEMPLATE,
    USED_COLOURS_TEMPLATE,
)
from colour_task.core.models import FeedbackSymbol, SlidePhase
from colour_task.core.slide_state_machine import SlideStateMachine
from colour_task.styling.color_palette import ColorPalette
from colour_task.styling.styles import Styles

_TILE_SIZE = 72


class SlidePanel(QWidget):
    """UI component rendering the current slide, countdown and colour tiles."""

    def __init__(
        self,
        machine: SlideStateMachine,
        on_confirm: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.machine = machine
        self.on_confirm = on_confirm

        self.tile_buttons: list[QPushButton] = []
        self.tile_labels: list[QLabel] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Slide card: counter, countdown, feedback glyph and subject
        card = QFrame(self)
        card.setObjectName("slideCard")
        card.setStyleSheet(f"QFrame#slideCard {{ {Styles.get_card_style()} }}")
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        header_row = QHBoxLayout()
        self.slide_counter_label = QLabel("", card)
        self.slide_counter_label.setStyleSheet(Styles.get_caption_style())
        header_row.addWidget(self.slide_counter_label)
        header_row.addStretch()

        self.time_label = QLabel("", card)
        self.time_label.setStyleSheet(Styles.get_caption_style(size_pt=14))
        header_row.addWidget(self.time_label)

        self.feedback_label = QLabel("", card)
        self.feedback_label.setFixedWidth(24)
        self.feedback_label.setAlignment(Qt.AlignRight | Qt.AlignTop)
        header_row.addWidget(self.feedback_label)
        card_layout.addLayout(header_row)

        self.prompt_label = QLabel("", card)
        self.prompt_label.setAlignment(Qt.AlignCenter)
        self.prompt_label.setStyleSheet(Styles.get_title_style(34))
        card_layout.addWidget(self.prompt_label, stretch=1)

        self.time_progress = QProgressBar(card)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setTextVisible(False)
        self.time_progress.setFixedHeight(8)
        card_layout.addWidget(self.time_progress)

        layout.addWidget(card, stretch=1)

        # Colour tiles
        tile_row = QHBoxLayout()
        tile_row.addStretch()
        for option in self.machine.get_options():
            column = QVBoxLayout()
            button = QPushButton("", self)
            button.setFixedSize(_TILE_SIZE, _TILE_SIZE)
            button.setFocusPolicy(Qt.NoFocus)
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(lambda _checked=False, option_id=option.id: self._handle_tile_click(option_id))
            column.addWidget(button, alignment=Qt.AlignHCenter)

            label = QLabel(option.name, self)
            label.setAlignment(Qt.AlignCenter)
            column.addWidget(label)

            self.tile_buttons.append(button)
            self.tile_labels.append(label)
            tile_row.addLayout(column)
        tile_row.addStretch()
        layout.addLayout(tile_row)

        # All Agree and usage counter
        bottom_row = QHBoxLayout()
        self.all_agree_button = QPushButton(ALL_AGREE_BUTTON, self)
        self.all_agree_button.setFocusPolicy(Qt.NoFocus)
        self.all_agree_button.clicked.connect(self.on_confirm)
        bottom_row.addWidget(self.all_agree_button)
        bottom_row.addStretch()

        self.used_label = QLabel("", self)
        self.used_label.setStyleSheet(Styles.get_caption_style(ColorPalette.TEXT_MUTED, 10))
        bottom_row.addWidget(self.used_label)
        layout.addLayout(bottom_row)

    def _handle_tile_click(self, option_id: int) -> None:
        if self.machine.select(option_id):
            self.refresh()

    def refresh(self) -> None:
        """Re-derive every widget from the machine's current state."""
        state = self.machine.state
        if not state.started:
            return

        prompts = self.machine.get_prompts()
        self.slide_counter_label.setText(
            SLIDE_COUNTER_TEMPLATE.format(current=state.prompt_index + 1, total=len(prompts))
        )
        self.prompt_label.setText(self.machine.get_current_prompt().label)

        # The countdown freezes on screen once the slide is locked.
        if state.phase is SlidePhase.AWAITING_SELECTION:
            self.time_label.setText(
                TIME_LEFT_TEMPLATE.format(seconds=self.machine.get_display_seconds())
            )
            self.time_progress.setValue(int(self.machine.get_time_fraction() * 1000))

        self._update_feedback(state.feedback_symbol)
        self._update_tiles(state.selected_option_id)
        self.all_agree_button.setEnabled(self.machine.can_confirm())

    def _update_tiles(self, selected_option_id: int | None) -> None:
        options = self.machine.get_options()
        for option, button, label in zip(options, self.tile_buttons, self.tile_labels):
            button.setStyleSheet(
                Styles.get_tile_style(
                    option.colour,
                    selected=option.id == selected_option_id,
                    used=option.consumed,
                )
            )
            button.setEnabled(not option.consumed)
            label_color = ColorPalette.TILE_USED_TEXT if option.consumed else ColorPalette.SLIDE_SCREEN.text
            label.setStyleSheet(Styles.get_caption_style(label_color, 9))
        self.used_label.setText(
            USED_COLOURS_TEMPLATE.format(used=self.machine.get_used_option_count(), total=len(options))
        )

    def _update_feedback(self, symbol: FeedbackSymbol | None) -> None:
        if symbol is None:
            self.feedback_label.setText("")
            return
        if symbol is FeedbackSymbol.CROSS:
            self.feedback_label.setText(FEEDBACK_CROSS)
            self.feedback_label.setStyleSheet(Styles.get_feedback_style(ColorPalette.FEEDBACK_CROSS))
        else:
            self.feedback_label.setText(FEEDBACK_TICK)
            self.feedback_label.setStyleSheet(Styles.get_feedback_style(ColorPalette.FEEDBACK_TICK))
