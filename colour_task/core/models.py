"""Domain models for the colour match task."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType


class EventKind(str, Enum):
    """Kinds of interaction recorded in the click log."""

    START_GAME = "START_GAME"
    COLOUR_CLICK = "COLOUR_CLICK"
    ALL_AGREE = "ALL_AGREE"
    TIMER_EXPIRED = "TIMER_EXPIRED"
    RESTART = "RESTART"


class SlidePhase(Enum):
    """Lifecycle phase of the slide state machine."""

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()
    LOCKED = auto()
    TRANSITIONING = auto()
    ENDED = auto()


class FeedbackSymbol(Enum):
    """Corner glyph flashed while a slide transition is in progress."""

    TICK = auto()
    CROSS = auto()


@dataclass(frozen=True, slots=True)
class Prompt:
    """A subject label at a fixed position in the slide sequence."""

    index: int
    label: str


@dataclass(slots=True)
class ColourOption:
    """Single-use colour slot in the option pool."""

    id: int
    name: str
    colour: str  # "#rrggbb"
    consumed: bool = False


@dataclass(frozen=True, slots=True)
class Answer:
    """Recorded outcome for one slide.

    ``option_id is None`` is the explicit "no answer" marker written when the
    group confirms without a selection; ``correct`` is then ``None`` too.
    """

    option_id: int | None
    correct: bool | None

    @property
    def is_answered(self) -> bool:
        return self.option_id is not None


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Immutable click log record; ``extra`` is stored as a read-only copy."""

    event: EventKind
    time_ms: float
    slide_index: int
    selected_index: int | None
    extra: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


@dataclass(slots=True)
class SessionState:
    """Snapshot of everything the slide state machine owns."""

    phase: SlidePhase = SlidePhase.NOT_STARTED
    prompt_index: int = 0
    selected_option_id: int | None = None
    answers: list[Answer | None] = field(default_factory=list)
    feedback_symbol: FeedbackSymbol | None = None

    @property
    def started(self) -> bool:
        return self.phase is not SlidePhase.NOT_STARTED

    @property
    def locked(self) -> bool:
        return self.phase in (SlidePhase.LOCKED, SlidePhase.TRANSITIONING, SlidePhase.ENDED)

    @property
    def transitioning(self) -> bool:
        return self.phase is SlidePhase.TRANSITIONING

    @property
    def ended(self) -> bool:
        return self.phase is SlidePhase.ENDED

    @property
    def has_selection(self) -> bool:
        return self.selected_option_id is not None

