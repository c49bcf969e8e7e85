import pytest

from colour_task.core.services.session_clock import SessionClock


def test_remaining_counts_down_and_clamps(clock):
    session_clock = SessionClock(clock)
    session_clock.start(15)

    assert session_clock.remaining() == 15
    clock.advance_seconds(4.2)
    assert session_clock.remaining() == pytest.approx(10.8)
    assert session_clock.display_seconds() == 11
    assert not session_clock.expired()

    clock.advance_seconds(20)
    assert session_clock.remaining() == 0
    assert session_clock.display_seconds() == 0
    assert session_clock.expired()


def test_fraction_tracks_progress(clock):
    session_clock = SessionClock(clock)
    session_clock.start(10)

    clock.advance_seconds(2.5)

    assert session_clock.fraction() == pytest.approx(0.75)


def test_restart_moves_deadline(clock):
    session_clock = SessionClock(clock)
    session_clock.start(1)
    clock.advance_seconds(2)
    assert session_clock.expired()

    session_clock.start(1)

    assert not session_clock.expired()
    assert session_clock.remaining() == 1


def test_unstarted_clock_is_not_expired(clock):
    session_clock = SessionClock(clock)

    assert not session_clock.expired()
    assert session_clock.remaining() == 0


def test_rejects_non_positive_duration(clock):
    with pytest.raises(ValueError):
        SessionClock(clock).start(0)
