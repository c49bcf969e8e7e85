"""State machine that runs one colour match task from start screen to summary."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Protocol

from colour_task.constants.task_constants import (
    ANSWER_CORRECT_PROBABILITY,
    FEEDBACK_CROSS_PROBABILITY,
    OPTION_COUNT,
    PROMPT_LABELS,
    SLIDE_SECONDS,
    TRANSITION_FEEDBACK_MS,
)
from colour_task.core.errors import ColourTaskError, InvalidTransition
from colour_task.core.models import (
    Answer,
    ColourOption,
    EventKind,
    FeedbackSymbol,
    LogEntry,
    Prompt,
    SessionState,
    SlidePhase,
)
from colour_task.core.services.event_log import EventLog
from colour_task.core.services.option_pool import OptionPool
from colour_task.core.services.session_clock import SessionClock, TimeSource, monotonic_ms
from colour_task.core.services.session_summary import SessionSummary, compute_summary

logger = logging.getLogger(__name__)

LogSink = Callable[[list[LogEntry]], None]


class RandomSource(Protocol):
    def random(self) -> float: ...


class SlideStateMachine:
    """Owns the session state and applies one stimulus at a time.

    Stimuli are ``start``, ``select``, ``confirm``, ``reset`` (from the user)
    and ``tick`` (from the host's scheduler). Each returns ``True`` when it
    changed the state and ``False`` when a guard ignored it.
    """

    def __init__(
        self,
        prompt_labels: Sequence[str] = PROMPT_LABELS,
        option_count: int = OPTION_COUNT,
        *,
        slide_seconds: float = SLIDE_SECONDS,
        transition_ms: float = TRANSITION_FEEDBACK_MS,
        time_source: TimeSource = monotonic_ms,
        rng: RandomSource | None = None,
        log_sink: LogSink | None = None,
    ) -> None:
        if not prompt_labels:
            raise ValueError("Task must contain at least one prompt.")
        self._prompts = [Prompt(index=idx, label=label) for idx, label in enumerate(prompt_labels)]
        self._pool = OptionPool.with_count(option_count)
        self._now = time_source
        self._origin_ms = time_source()
        self._clock = SessionClock(time_source)
        self._log = EventLog()
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._log_sink = log_sink
        self._slide_seconds = slide_seconds
        self._transition_ms = transition_ms
        self._advance_due_ms: float | None = None
        self._summary: SessionSummary | None = None
        self._state = SessionState(answers=[None] * len(self._prompts))

    # --- Read access ---

    @property
    def state(self) -> SessionState:
        """Return a copy of the session state."""
        return replace(self._state, answers=list(self._state.answers))

    @property
    def phase(self) -> SlidePhase:
        return self._state.phase

    @property
    def summary(self) -> SessionSummary | None:
        """End-of-task statistics, available once the task has ended."""
        if self._state.phase is not SlidePhase.ENDED:
            return None
        return self._summary

    def get_prompts(self) -> list[Prompt]:
        return list(self._prompts)

    def get_current_prompt(self) -> Prompt:
        return self._prompts[self._state.prompt_index]

    def get_options(self) -> list[ColourOption]:
        return self._pool.options()

    def get_remaining_option_count(self) -> int:
        return self._pool.remaining_count()

    def get_used_option_count(self) -> int:
        return self._pool.consumed_count()

    def get_event_log(self) -> list[LogEntry]:
        return self._log.entries()

    def get_remaining_seconds(self) -> float:
        return self._clock.remaining()

    def get_display_seconds(self) -> int:
        return self._clock.display_seconds()

    def get_time_fraction(self) -> float:
        return self._clock.fraction()

    def can_confirm(self) -> bool:
        """Whether All Agree should be enabled on this tick.

        Enabled once something is selected, or as a facilitator override once
        the countdown has run out but the expiry has not been processed yet.
        """
        if self._state.phase is not SlidePhase.AWAITING_SELECTION:
            return False
        return self._state.has_selection or self._clock.expired()

    def set_log_sink(self, sink: LogSink | None) -> None:
        self._log_sink = sink

    # --- Stimuli ---

    def start(self) -> bool:
        try:
            self._require_phase("start", SlidePhase.NOT_STARTED)
        except InvalidTransition as exc:
            logger.debug("Ignored start: %s", exc)
            return False

        self._record(EventKind.START_GAME)
        self._begin_prompt(0)
        logger.info(
            "Colour task started with %d slides and %d colours",
            len(self._prompts),
            len(self._pool),
        )
        return True

    def select(self, option_id: int) -> bool:
        try:
            self._require_phase("select", SlidePhase.AWAITING_SELECTION)
            option = self._pool.ensure_available(option_id)
        except ColourTaskError as exc:
            logger.debug("Ignored selection of colour %s: %s", option_id, exc)
            return False

        self._state.selected_option_id = option.id
        self._record(EventKind.COLOUR_CLICK, colourIndex=option.id, colourName=option.name)
        return True

    def confirm(self) -> bool:
        try:
            self._require_phase("confirm", SlidePhase.AWAITING_SELECTION)
        except InvalidTransition as exc:
            logger.debug("Ignored All Agree: %s", exc)
            return False

        self._state.phase = SlidePhase.LOCKED
        self._record(EventKind.ALL_AGREE, **self._choice_details())
        if self._state.has_selection:
            self._resolve_answer()
        else:
            self._state.answers[self._state.prompt_index] = Answer(option_id=None, correct=None)
        self._begin_transition()
        return True

    def tick(self) -> bool:
        """Process time-driven transitions; call on every scheduling tick."""
        phase = self._state.phase
        if phase is SlidePhase.TRANSITIONING:
            if self._advance_due_ms is not None and self._now() >= self._advance_due_ms:
                self._finish_transition()
                return True
            return False
        if phase is SlidePhase.AWAITING_SELECTION and self._clock.expired():
            self._expire()
            return True
        return False

    def reset(self) -> bool:
        """Start the task over from the first slide; the click log is kept.

        Also accepted before ``start()``, in which case the start screen is
        skipped and only ``RESTART`` is logged.
        """
        if self._state.phase is SlidePhase.TRANSITIONING:
            logger.debug("Ignored restart: a slide transition is in progress")
            return False

        self._record(EventKind.RESTART)
        self._state = SessionState(answers=[None] * len(self._prompts))
        self._pool.reset()
        self._summary = None
        self._begin_prompt(0)
        logger.info("Colour task restarted")
        return True

    # --- Internals ---

    def _require_phase(self, operation: str, *allowed: SlidePhase) -> None:
        if self._state.phase not in allowed:
            raise InvalidTransition(
                f"{operation} is not allowed while {self._state.phase.name.lower()}"
            )

    def _begin_prompt(self, index: int) -> None:
        self._state.prompt_index = index
        self._state.selected_option_id = None
        self._state.feedback_symbol = None
        self._state.phase = SlidePhase.AWAITING_SELECTION
        self._advance_due_ms = None
        self._clock.start(self._slide_seconds)

    def _expire(self) -> None:
        self._state.phase = SlidePhase.LOCKED
        self._record(EventKind.TIMER_EXPIRED, **self._choice_details())
        # Without a selection the slide stays unanswered and no colour is used.
        if self._state.has_selection:
            self._resolve_answer()
        self._begin_transition()

    def _resolve_answer(self) -> None:
        option_id = self._state.selected_option_id
        correct = self._rng.random() < ANSWER_CORRECT_PROBABILITY
        self._pool.mark_consumed(option_id)
        self._state.answers[self._state.prompt_index] = Answer(option_id=option_id, correct=correct)

    def _begin_transition(self) -> None:
        if self._rng.random() < FEEDBACK_CROSS_PROBABILITY:
            self._state.feedback_symbol = FeedbackSymbol.CROSS
        else:
            self._state.feedback_symbol = FeedbackSymbol.TICK
        self._state.phase = SlidePhase.TRANSITIONING
        self._advance_due_ms = self._now() + self._transition_ms

    def _finish_transition(self) -> None:
        self._state.feedback_symbol = None
        self._advance_due_ms = None
        next_index = self._state.prompt_index + 1
        if self._pool.is_exhausted() or next_index >= len(self._prompts):
            self._end_task()
            return
        self._begin_prompt(next_index)

    def _end_task(self) -> None:
        self._state.phase = SlidePhase.ENDED
        self._summary = compute_summary(self._state.answers)
        logger.info(
            "Colour task ended: %d answered, %d%% correct",
            self._summary.answered,
            self._summary.percentage,
        )
        if self._log_sink is not None and len(self._log) > 0:
            self._log_sink(self._log.entries())

    def _choice_details(self) -> dict[str, object]:
        option_id = self._state.selected_option_id
        return {
            "hadSelection": option_id is not None,
            "chosenColourIndex": option_id,
            "chosenColourName": self._pool.get(option_id).name if option_id is not None else None,
        }

    def _record(self, kind: EventKind, **extra: object) -> None:
        self._log.append(
            LogEntry(
                event=kind,
                time_ms=self._now() - self._origin_ms,
                slide_index=self._state.prompt_index,
                selected_index=self._state.selected_option_id,
                extra=extra,
            )
        )
