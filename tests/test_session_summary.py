import pytest

from colour_task.core.models import Answer
from colour_task.core.services.session_summary import SessionSummary, compute_summary


def test_nothing_answered_reports_zero():
    answers = [None, Answer(option_id=None, correct=None), None]

    assert compute_summary(answers) == SessionSummary(answered=0, correct_count=0, percentage=0)


def test_counts_only_answers_with_a_colour():
    answers = [
        Answer(option_id=0, correct=True),
        Answer(option_id=None, correct=None),
        None,
        Answer(option_id=3, correct=False),
        Answer(option_id=5, correct=True),
    ]

    summary = compute_summary(answers)

    assert summary.answered == 3
    assert summary.correct_count == 2
    assert summary.percentage == 67


@pytest.mark.parametrize(
    ("correct", "answered", "expected"),
    [(1, 8, 13), (3, 8, 38), (1, 3, 33), (0, 5, 0), (4, 4, 100)],
)
def test_percentage_rounds_half_up(correct, answered, expected):
    answers = [Answer(option_id=idx, correct=idx < correct) for idx in range(answered)]

    summary = compute_summary(answers)

    assert summary.percentage == expected
    assert isinstance(summary.percentage, int)
