"""Service for computing end-of-task statistics."""

from __future__ import annotations

from dataclasses import dataclass

from colour_task.core.models import Answer


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Immutable snapshot returned to the end screen."""

    answered: int
    correct_count: int
    percentage: int


def compute_summary(answers: list[Answer | None]) -> SessionSummary:
    """Count answered slides and the share judged correct.

    Slides left unanswered by a timeout (``None``) and explicit "no answer"
    markers are both excluded from ``answered``.
    """
    answered = [answer for answer in answers if answer is not None and answer.is_answered]
    if not answered:
        return SessionSummary(answered=0, correct_count=0, percentage=0)

    correct_count = sum(1 for answer in answered if answer.correct is True)
    # Round half up: 1 of 8 correct reports 13%.
    percentage = (200 * correct_count + len(answered)) // (2 * len(answered))
    return SessionSummary(
        answered=len(answered),
        correct_count=correct_count,
        percentage=percentage,
    )
